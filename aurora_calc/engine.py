import logging
import math
import re
from typing import Callable, List, Optional

from .evaluator import EvaluationError, format_number, percent_literal, safe_eval
from .models import HistoryEntry

logger = logging.getLogger(__name__)

ERROR = "Error"
BINARY_OPERATORS = "+-×÷"

_TRAILING_NUMBER = re.compile(r"([0-9]+(?:\.[0-9]+)?)$")


class ExpressionEngine:
    """
    عبارت جاری را نگه می‌دارد و فشردن دکمه‌ها را روی آن اعمال می‌کند.

    رویدادهای ثبت (RESULT و LOG) به صورت HistoryEntry به همه‌ی callbackهای
    ``on_commit`` داده می‌شوند. موتور هیچ‌وقت استثنا پرت نمی‌کند: ورودی نامعتبر
    نادیده گرفته می‌شود و محاسبه‌ی ناموفق "Error" می‌شود.
    """

    def __init__(self, expression: str = ""):
        self._expression = expression
        self._commit_listeners: List[Callable[[HistoryEntry], None]] = []

    @property
    def expression(self) -> str:
        return self._expression

    def on_commit(self, callback: Callable[[HistoryEntry], None]):
        self._commit_listeners.append(callback)

    def _commit(self, entry: HistoryEntry) -> HistoryEntry:
        for callback in self._commit_listeners:
            callback(entry)
        return entry

    def append_symbol(self, symbol: str):
        self._expression += symbol

    def append_operator(self, op: str):
        expr = self._expression
        if expr == "" and op != "-":
            return
        if expr and expr[-1] in BINARY_OPERATORS:
            self._expression = expr[:-1] + op
        else:
            self._expression = expr + op

    def delete_last(self):
        if self._expression:
            self._expression = self._expression[:-1]

    def _trailing_number(self):
        return _TRAILING_NUMBER.search(self._expression)

    def apply_log10(self) -> Optional[HistoryEntry]:
        match = self._trailing_number()
        if not match:
            return None
        value = float(match.group(1))
        if value <= 0 or not math.isfinite(value):
            logger.debug("log10 ignored for non-positive %r", match.group(1))
            return None
        trimmed = format_number(math.log10(value))
        self._expression = self._expression[:match.start()] + trimmed
        return self._commit(HistoryEntry(f"log({format_number(value)})", trimmed))

    def apply_percent(self):
        match = self._trailing_number()
        if not match:
            return
        self._expression = self._expression[:match.start()] + percent_literal(match.group(1))

    def evaluate(self) -> str:
        """
        عبارت را محاسبه می‌کند؛ نتیجه (یا "Error") جایگزین عبارت می‌شود
        و در هر دو حالت یک رکورد تاریخچه ثبت می‌شود.
        """
        original = self._expression
        try:
            result = format_number(safe_eval(original or "0"))
        except (EvaluationError, RecursionError) as e:
            logger.info("evaluation of %r failed: %s", original, e)
            result = ERROR
        self._expression = "" if result == ERROR else result
        self._commit(HistoryEntry(original or "0", result))
        return result

    def reset(self):
        self._expression = ""

    def load(self, text: str):
        """جایگزینی کل عبارت، مثلاً با نتیجه‌ای که از تاریخچه انتخاب شده"""
        self._expression = text
