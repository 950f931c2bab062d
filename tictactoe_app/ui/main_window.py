from loguru import logger

from ..game_logic import GameLogic, ResultKind
from ..theme import Theme
from .board_widget import BoardWidget
from .palette import apply_palette
from .scoreboard_widget import ScoreboardWidget

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status, scoreboard, resets and theme toggle
    """
    def __init__(self, game_logic=None, theme=Theme.LIGHT):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic or GameLogic()
        self.theme = theme
        self.board_widget = BoardWidget(self.game_logic, theme=theme, parent=self)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # theme toggle + title + status
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # scoreboard + reset buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        reset_board_action = QAction("Reset Board", self)
        reset_board_action.triggered.connect(self.reset_board)
        reset_all_action = QAction("Reset All", self)
        reset_all_action.triggered.connect(self.reset_all)
        theme_action = QAction("Toggle Theme", self)
        theme_action.triggered.connect(self.toggle_theme)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (reset_board_action, reset_all_action, theme_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        # theme button top-right, then title and status
        top = QHBoxLayout(); top.addStretch(1)
        self.theme_button = QPushButton()
        self.theme_button.clicked.connect(self.toggle_theme)
        top.addWidget(self.theme_button)
        self.main_layout.addLayout(top)

        self.title_label = QLabel("Tic Tac Toe")
        f = QFont(); f.setPointSize(20); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.title_label)

        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.main_layout.addWidget(self.status_label)
        self._update_theme_button()

    def _create_bottom_controls(self):
        # scoreboard + reset buttons
        self.controls_bottom_widget = QWidget()
        vl = QVBoxLayout(self.controls_bottom_widget)
        self.scoreboard_widget = ScoreboardWidget()
        vl.addWidget(self.scoreboard_widget)
        hl = QHBoxLayout()
        self.reset_board_button = QPushButton("Reset Board")
        self.reset_board_button.clicked.connect(self.reset_board)
        self.reset_all_button = QPushButton("Reset All")
        self.reset_all_button.clicked.connect(self.reset_all)
        self.reset_all_button.setStyleSheet("color: #fa5252;")
        for w in (None, self.reset_board_button, self.reset_all_button, None):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)
        vl.addLayout(hl)

    def _update_theme_button(self):
        self.theme_button.setText(self.theme.button_label)
        self.theme_button.setAccessibleName(self.theme.accessible_name)
        self.theme_button.setToolTip(self.theme.accessible_name)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set status text + style
        style = ""
        if is_success: style = "color: #2f9e44; font-weight: bold;"
        elif is_turn:  style = "color: #228be6; font-weight: bold;"
        self.status_label.setStyleSheet(style)
        self.status_label.setText(text)

    def _refresh(self):
        '''redraw everything from engine state'''
        result = self.game_logic.result
        self._update_message(
            self.game_logic.status_text(),
            is_success=result.kind is not ResultKind.IN_PROGRESS,
            is_turn=result.kind is ResultKind.IN_PROGRESS,
        )
        self.scoreboard_widget.update_scores(self.game_logic.scoreboard)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, idx):
        # engine ignores taken cells and finished games
        if self.game_logic.select_cell(idx):
            self._refresh()

    @Slot()
    def reset_board(self):
        self.game_logic.reset_board()
        self._refresh()

    @Slot()
    def reset_all(self):
        self.game_logic.reset_all()
        self._refresh()

    @Slot()
    def toggle_theme(self):
        # theme never touches game state
        self.theme = self.theme.toggled()
        app = QApplication.instance()
        if app is not None:
            apply_palette(app, self.theme)
        self.board_widget.set_theme(self.theme)
        self._update_theme_button()
        logger.info(f"theme switched to {self.theme.value}")
