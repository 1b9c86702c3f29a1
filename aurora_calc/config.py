import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_ENV = "AURORA_CALC_CONFIG"
DEFAULT_DATA_DIR = "~/.aurora_calc"

DEFAULT_CONFIG = {
    "data_dir": DEFAULT_DATA_DIR,
    "history_limit": 50,
    "persist_history": True,
    "log_level": "WARNING",
}


class ConfigManager:
    """مدیریت تنظیمات برنامه"""

    @staticmethod
    def config_path(path=None) -> Path:
        """مسیر فایل تنظیمات: --config، سپس $AURORA_CALC_CONFIG، سپس <data_dir>/config.json"""
        if path:
            return Path(path).expanduser()
        if os.getenv(CONFIG_ENV):
            return Path(os.environ[CONFIG_ENV]).expanduser()
        return Path(DEFAULT_DATA_DIR).expanduser() / "config.json"

    @staticmethod
    def load_config(path=None):
        """بارگذاری تنظیمات از فایل؛ کلیدهای ناموجود از پیش‌فرض پر می‌شوند"""
        config = dict(DEFAULT_CONFIG)
        config_file = ConfigManager.config_path(path)
        if not config_file.exists():
            return config
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            if not isinstance(loaded, dict):
                raise ValueError("config must be a JSON object")
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("could not load config %s: %s", config_file, e)
            return config
        config.update({k: v for k, v in loaded.items() if k in DEFAULT_CONFIG})
        try:
            config["history_limit"] = max(1, int(config["history_limit"]))
        except (TypeError, ValueError):
            logger.warning("invalid history_limit %r, using default", config["history_limit"])
            config["history_limit"] = DEFAULT_CONFIG["history_limit"]
        if not isinstance(config["persist_history"], bool):
            logger.warning("invalid persist_history %r, using default", config["persist_history"])
            config["persist_history"] = DEFAULT_CONFIG["persist_history"]
        return config

    @staticmethod
    def save_config(config, path=None):
        """ذخیره‌ی تنظیمات در فایل"""
        config_file = ConfigManager.config_path(path)
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, "w", encoding="utf-8") as f:
                json.dump(config, f, ensure_ascii=False, indent=2)
            return True
        except OSError as e:
            logger.error("could not save config %s: %s", config_file, e)
            return False
