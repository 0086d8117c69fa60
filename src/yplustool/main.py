"""
Application Initialization
==========================
This module wires the store and the main window together and starts the Qt
event loop.
"""
import logging
import sys

from yplustool.app.application import create_app
from yplustool.app.ui.main_window import MainWindow
from yplustool.app.state import CalculatorStore
from yplustool.config import log_file_from_env, log_level_from_env
from yplustool.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (YPLUS_LOG_LEVEL=debug to see every calculation)
    setup_logging(level=log_level_from_env(), log_file=log_file_from_env())

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the store and the Main Window
    store = CalculatorStore()
    window = MainWindow(store)
    window.show()
    logger.debug("Main window shown.")

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
