from .models import HistoryEntry, CalculatorState
from .buttons import BUTTONS, ButtonDescriptor
from .engine import ExpressionEngine, ERROR
from .history import HistoryLedger
from .storage import JsonFileStorage, MemoryStorage
from .controller import CalculatorController

__version__ = "0.1.0"
