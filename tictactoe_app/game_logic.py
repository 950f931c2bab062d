from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from loguru import logger

BOARD_SIZE = 3                       # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diagonals; scan order decides which line is reported
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class CellIndexError(IndexError):
    """
    cell index outside 0-8, never produced by the board widget
    """


class Player(Enum):
    X = "X"
    O = "O"

    def opposite(self):
        return Player.O if self is Player.X else Player.X

    def __str__(self):
        return self.value


class ResultKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """
    outcome of a board: in progress, a win on one line, or a draw
    """
    kind: ResultKind
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None

    @classmethod
    def win(cls, player, line):
        return cls(ResultKind.WIN, player, tuple(line))

    @property
    def is_terminal(self):
        return self.kind is not ResultKind.IN_PROGRESS


IN_PROGRESS = GameResult(ResultKind.IN_PROGRESS)
DRAW = GameResult(ResultKind.DRAW)


@dataclass
class Scoreboard:
    """
    session tally; only grows until a full reset
    """
    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, result: GameResult):
        # called once per transition into a terminal result
        if result.kind is ResultKind.WIN:
            if result.winner is Player.X: self.x += 1
            else: self.o += 1
        elif result.kind is ResultKind.DRAW:
            self.draws += 1

    def wins_for(self, player: Player) -> int:
        return self.x if player is Player.X else self.o

    def as_dict(self):
        return {"X": self.x, "O": self.o, "draws": self.draws}


def evaluate(board) -> GameResult:
    """
    scan the 8 lines in order, first uniform non-empty line wins;
    a full board with no such line is a draw
    """
    for line in LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return GameResult.win(board[a], line)
    if all(cell is not None for cell in board):
        return DRAW
    return IN_PROGRESS


def status_text(result: GameResult, turn: Player) -> str:
    """
    status line shown above the board
    """
    if result.kind is ResultKind.WIN:
        return f"Winner: Player {result.winner}"
    if result.kind is ResultKind.DRAW:
        return "Game is a draw"
    return f"Next: Player {turn}"


class GameLogic:
    """
    tic-tac-toe rules, turn and session scores
    """
    def __init__(self):
        """
        empty board, X to move, zero scores
        """
        self._board = [None] * CELL_COUNT   # None means empty
        self._turn = Player.X
        self._result = IN_PROGRESS
        self._scoreboard = Scoreboard()

    # -- queries ------------------------------------------------------------

    @property
    def board(self):
        return tuple(self._board)

    @property
    def turn(self):
        return self._turn

    @property
    def result(self):
        return self._result

    @property
    def scoreboard(self):
        return replace(self._scoreboard)

    @property
    def winning_line(self):
        return self._result.line

    @property
    def is_over(self):
        return self._result.is_terminal

    def is_cell_playable(self, index):
        """
        true if the cell is empty and the game still running
        """
        self._check_index(index)
        return self._board[index] is None and not self._result.is_terminal

    def status_text(self):
        return status_text(self._result, self._turn)

    # -- mutations ----------------------------------------------------------

    def select_cell(self, index):
        """
        place the current player's mark at index
        returns True if the move was taken, False if it was ignored
        (occupied cell or finished game)
        """
        self._check_index(index)
        if self._result.is_terminal:
            logger.debug(f"ignored move at {index}: game is over")
            return False
        if self._board[index] is not None:
            logger.debug(f"ignored move at {index}: cell taken by {self._board[index]}")
            return False

        player = self._turn
        self._board[index] = player
        self._turn = player.opposite()
        self._result = evaluate(self._board)
        logger.debug(f"player {player} took cell {index}")

        if self._result.is_terminal:
            self._scoreboard.record(self._result)
            if self._result.kind is ResultKind.WIN:
                logger.info(f"player {player} wins on line {self._result.line}")
            else:
                logger.info("game ended in a draw")
            logger.info(f"scores now {self._scoreboard.as_dict()}")
        return True

    def reset_board(self):
        """
        clear board and turn, keep scores
        """
        self._board = [None] * CELL_COUNT
        self._turn = Player.X
        self._result = IN_PROGRESS
        logger.info("board reset")

    def reset_all(self):
        """
        clear board and zero the scoreboard
        """
        self.reset_board()
        self._scoreboard = Scoreboard()
        logger.info("scoreboard reset")

    @staticmethod
    def _check_index(index):
        # bool is an int subclass but never a cell
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < CELL_COUNT:
            raise CellIndexError(f"cell index must be 0-{CELL_COUNT - 1}, got {index!r}")
