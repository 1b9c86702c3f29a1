import argparse
import logging
import sys

from .config import ConfigManager
from .controller import CalculatorController
from .history import HistoryLedger
from .storage import JsonFileStorage, MemoryStorage


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="aurora-calc", description="Calculator with persisted history")
    parser.add_argument("--config", help="path to config.json")
    parser.add_argument("--data-dir", help="directory holding the history file")
    parser.add_argument("--no-persist", action="store_true", help="keep history in memory only")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def build_controller(config):
    if config["persist_history"]:
        storage = JsonFileStorage(config["data_dir"])
    else:
        storage = MemoryStorage()
    ledger = HistoryLedger(storage, limit=config["history_limit"])
    ledger.load()
    return CalculatorController(ledger)


def main(argv=None):
    args = parse_args(argv)
    config = ConfigManager.load_config(args.config)
    if args.data_dir:
        config["data_dir"] = args.data_dir
    if args.no_persist:
        config["persist_history"] = False
    if args.log_level:
        config["log_level"] = args.log_level

    logging.basicConfig(
        level=getattr(logging, str(config["log_level"]).upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    from PySide6.QtWidgets import QApplication
    from .app import CalculatorWindow

    app = QApplication(sys.argv[:1])
    window = CalculatorWindow(build_controller(config))
    window.resize(360, 560)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
