from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class HistoryEntry:
    """یک رکورد تاریخچه: عبارت و نتیجه‌ی نمایشی آن"""
    expression: str
    result: str

    def to_dict(self):
        return {"expression": self.expression, "result": self.result}


@dataclass(frozen=True)
class CalculatorState:
    """تصویر وضعیت که پس از هر رویداد ورودی به ناظرها داده می‌شود"""
    display: str
    expression: str
    history: Tuple[HistoryEntry, ...] = ()
    history_visible: bool = False
