from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from ..game_logic import Player


class ScoreboardWidget(QWidget):
    """
    X / O / draws tally row
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAccessibleName("Scoreboard")
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        f = QFont(); f.setPointSize(11); f.setBold(True)
        self.x_label = QLabel(); self.o_label = QLabel(); self.draws_label = QLabel()
        for lbl in (self.x_label, self.o_label, self.draws_label):
            lbl.setFont(f)
            lbl.setAlignment(Qt.AlignCenter)
            layout.addWidget(lbl)
        self.x_label.setStyleSheet("color: #228be6;")
        self.o_label.setStyleSheet("color: #fa5252;")
        self.update_scores(None)

    def update_scores(self, scoreboard):
        # None shows an empty session
        x, o, draws = (0, 0, 0) if scoreboard is None else \
            (scoreboard.wins_for(Player.X), scoreboard.wins_for(Player.O), scoreboard.draws)
        self.x_label.setText(f"X: {x}")
        self.o_label.setText(f"O: {o}")
        self.draws_label.setText(f"Draws: {draws}")
