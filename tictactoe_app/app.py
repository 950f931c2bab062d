import sys

from dotenv import load_dotenv
from loguru import logger
from PySide6.QtWidgets import QApplication

from .config import load_config
from .log import configure_logging
from .ui.main_window import TicTacToeWindow
from .ui.palette import apply_palette

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    load_dotenv()
    config = load_config()
    configure_logging(config.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    app.setStyle('Fusion')
    apply_palette(app, config.theme)

    window = TicTacToeWindow(theme=config.theme)
    window.resize(config.window_width, config.window_height)
    window.show()
    logger.info(f"started with {config.theme.value} theme")
    return app.exec()
