import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

HISTORY_KEY = "aurora_calc_history"


class JsonFileStorage:
    """ذخیره‌ی بایت‌های تاریخچه در یک فایل JSON با کلید نام‌دار"""

    def __init__(self, directory, key: str = HISTORY_KEY):
        self.directory = Path(directory).expanduser()
        self.key = key

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def load(self) -> Optional[bytes]:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning("could not read %s: %s", self.path, e)
            return None

    def save(self, data: bytes):
        # فایل کامل در یک فایل موقت نوشته و سپس جایگزین می‌شود
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{self.key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def clear(self):
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass


class MemoryStorage:
    """نگهداری تاریخچه در حافظه؛ با بسته شدن برنامه چیزی باقی نمی‌ماند"""

    def __init__(self, data: Optional[bytes] = None):
        self.data = data

    def load(self) -> Optional[bytes]:
        return self.data

    def save(self, data: bytes):
        self.data = data

    def clear(self):
        self.data = None
