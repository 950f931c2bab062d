from dataclasses import dataclass

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from ..theme import Theme

# -----------------------------------------------------------------------------
# BRAND COLORS
# -----------------------------------------------------------------------------

PRIMARY_COLOR = QColor("#228be6")
SECONDARY_COLOR = QColor("#495057")
ACCENT_COLOR = QColor("#fa5252")


@dataclass(frozen=True)
class BoardColors:
    """colors the board widget paints with"""
    background: QColor
    grid: QColor
    x_mark: QColor
    o_mark: QColor
    win_cell: QColor
    disabled_cell: QColor


@dataclass(frozen=True)
class ThemeColors:
    window: QColor
    window_text: QColor
    base: QColor
    alt_base: QColor
    text: QColor
    button: QColor
    button_text: QColor
    placeholder_text: QColor
    disabled_text: QColor
    board: BoardColors


# -----------------------------------------------------------------------------
# THEMES
# -----------------------------------------------------------------------------

LIGHT_COLORS = ThemeColors(
    window=QColor(248, 249, 250),
    window_text=QColor(33, 37, 41),
    base=QColor(255, 255, 255),
    alt_base=QColor(241, 243, 245),
    text=QColor(33, 37, 41),
    button=QColor(233, 236, 239),
    button_text=QColor(33, 37, 41),
    placeholder_text=QColor(134, 142, 150),
    disabled_text=QColor(173, 181, 189),
    board=BoardColors(
        background=QColor("#ffffff"),
        grid=SECONDARY_COLOR,
        x_mark=PRIMARY_COLOR,
        o_mark=ACCENT_COLOR,
        win_cell=QColor("#fff3bf"),
        disabled_cell=QColor("#f1f3f5"),
    ),
)

DARK_COLORS = ThemeColors(
    window=QColor(53, 53, 53),
    window_text=QColor(255, 255, 255),
    base=QColor(35, 35, 35),
    alt_base=QColor(53, 53, 53),
    text=QColor(255, 255, 255),
    button=QColor(66, 66, 66),
    button_text=QColor(255, 255, 255),
    placeholder_text=QColor(160, 160, 160),
    disabled_text=QColor(127, 127, 127),
    board=BoardColors(
        background=QColor("#333333"),
        grid=QColor("#555555"),
        x_mark=QColor("#8acaff"),
        o_mark=QColor("#ff8a8a"),
        win_cell=QColor("#5c4b00"),
        disabled_cell=QColor("#2b2b2b"),
    ),
)


def colors_for(theme: Theme) -> ThemeColors:
    return DARK_COLORS if theme is Theme.DARK else LIGHT_COLORS


# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def build_palette(theme: Theme) -> QPalette:
    """
    Build the application palette for a theme.
    """
    c = colors_for(theme)
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, c.window)
    palette.setColor(QPalette.WindowText, c.window_text)
    palette.setColor(QPalette.Base, c.base)
    palette.setColor(QPalette.AlternateBase, c.alt_base)
    palette.setColor(QPalette.ToolTipBase, c.base)
    palette.setColor(QPalette.ToolTipText, c.text)
    palette.setColor(QPalette.Text, c.text)
    palette.setColor(QPalette.Button, c.button)
    palette.setColor(QPalette.ButtonText, c.button_text)
    palette.setColor(QPalette.BrightText, ACCENT_COLOR)
    palette.setColor(QPalette.Link, PRIMARY_COLOR)
    palette.setColor(QPalette.Highlight, PRIMARY_COLOR)
    palette.setColor(QPalette.HighlightedText, Qt.white)
    palette.setColor(QPalette.PlaceholderText, c.placeholder_text)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, c.disabled_text)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, c.disabled_text)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, c.disabled_text)
    return palette


def apply_palette(app: QApplication, theme: Theme):
    """
    Apply the palette for `theme` to the whole application.
    """
    app.setPalette(build_palette(theme))
