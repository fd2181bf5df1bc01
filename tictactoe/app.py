import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

GREY_DISABLED = QColor(127, 127, 127)
ACCENT = QColor(42, 130, 218)

PALETTE_COLORS = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: QColor(240, 240, 240),
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Highlight: ACCENT,
    QPalette.HighlightedText: Qt.white,
}

DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def build_dark_palette():
    """
    Fusion-friendly dark palette; disabled text is greyed out.
    """
    palette = QPalette()
    for role, color in PALETTE_COLORS.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, GREY_DISABLED)
    return palette


def apply_default_palette(app: QApplication):
    app.setStyle('Fusion')
    app.setPalette(build_dark_palette())

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv):
    """
    Split our own options from the ones Qt understands.
    """
    parser = argparse.ArgumentParser(prog="tictactoe", description="Two-player Tic Tac Toe.")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging threshold (default: WARNING)",
    )
    return parser.parse_known_args(argv)


def main(argv=None):
    argv = sys.argv if argv is None else argv
    args, qt_args = parse_args(argv[1:])
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    # QApplication is a singleton; reuse one if a host already made it
    app = QApplication.instance() or QApplication(argv[:1] + qt_args)
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.show()
    return app.exec()
