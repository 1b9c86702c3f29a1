import logging
from typing import Callable, List

from .buttons import BUTTONS, EQUAL, NUM, OP
from .engine import ExpressionEngine
from .history import HistoryLedger
from .models import CalculatorState, HistoryEntry

logger = logging.getLogger(__name__)


class CalculatorController:
    """
    وضعیت کامل ماشین‌حساب: موتور عبارت، تاریخچه و متن نمایشگر.

    پنجره مستقیماً به موتور یا تاریخچه دست نمی‌زند؛ فقط ``press`` و متدهای
    مشابه را صدا می‌زند و از روی CalculatorState که به ناظرهای ``subscribe``
    داده می‌شود دوباره رسم می‌کند.
    """

    def __init__(self, ledger: HistoryLedger, engine: ExpressionEngine = None):
        self.engine = engine or ExpressionEngine()
        self.ledger = ledger
        self.engine.on_commit(self.ledger.append)
        self.display = self.engine.expression or "0"
        self.history_visible = False
        self._subscribers: List[Callable[[CalculatorState], None]] = []

    @property
    def state(self) -> CalculatorState:
        return CalculatorState(
            display=self.display,
            expression=self.engine.expression,
            history=self.ledger.entries,
            history_visible=self.history_visible,
        )

    def subscribe(self, callback: Callable[[CalculatorState], None]):
        """ثبت یک ناظر؛ تابعی برمی‌گرداند که ناظر را حذف می‌کند"""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        return unsubscribe

    def _publish(self):
        state = self.state
        for callback in list(self._subscribers):
            callback(state)

    def _sync_display(self):
        self.display = self.engine.expression or "0"

    def press(self, button):
        """پردازش یک رویداد دکمه؛ ورودی خارج از ۲۱ دکمه نادیده گرفته می‌شود"""
        if button not in BUTTONS:
            logger.debug("ignoring unknown input %r", button)
            return
        label, kind = button
        if kind == NUM:
            self.engine.append_symbol(label)
        elif kind == OP and label == "%":
            self.engine.apply_percent()
        elif kind == OP:
            self.engine.append_operator(label)
        elif label == "DEL":
            self.engine.delete_last()
        elif label == "LOG":
            self.engine.apply_log10()
        elif kind == EQUAL:
            self.display = self.engine.evaluate()
            self._publish()
            return
        self._sync_display()
        self._publish()

    def clear_all(self):
        self.engine.reset()
        self.display = "0"
        self._publish()

    def clear_history(self):
        self.ledger.clear()
        self._publish()

    def load_entry(self, entry: HistoryEntry):
        """نتیجه‌ی یک رکورد تاریخچه جایگزین عبارت جاری می‌شود"""
        self.engine.load(entry.result)
        self.history_visible = False
        self._sync_display()
        self._publish()

    def show_history(self):
        self.history_visible = True
        self._publish()

    def hide_history(self):
        self.history_visible = False
        self._publish()
