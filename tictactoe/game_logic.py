import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple, Union

logger = logging.getLogger(__name__)

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags; checked in this order
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Cell(Enum):
    """
    one board position
    """
    EMPTY = ''
    X = 'X'
    O = 'O'

    def opposite(self) -> "Cell":
        # empty has no opponent and stays empty
        if self is Cell.EMPTY:
            return Cell.EMPTY
        return Cell.O if self is Cell.X else Cell.X


Grid = Tuple[Cell, ...]
EMPTY_GRID: Grid = (Cell.EMPTY,) * CELL_COUNT


@dataclass(frozen=True)
class NoOutcome:
    """
    game still running
    """


@dataclass(frozen=True)
class Win:
    """
    player completed line
    """
    player: Cell
    line: Tuple[int, int, int]


@dataclass(frozen=True)
class Draw:
    """
    full board, nobody won
    """


Outcome = Union[NoOutcome, Win, Draw]


def evaluate(grid: Grid) -> Outcome:
    """
    scan the 8 lines for three equal marks, else draw if full
    """
    for a, b, c in WINNING_LINES:
        if grid[a] is not Cell.EMPTY and grid[a] == grid[b] == grid[c]:
            return Win(grid[a], (a, b, c))
    if all(cell is not Cell.EMPTY for cell in grid):
        return Draw()
    return NoOutcome()


@dataclass(frozen=True)
class GameState:
    """
    board + whose turn; outcome is always derived from the grid
    """
    grid: Grid = EMPTY_GRID
    next_player: Cell = Cell.X

    @property
    def outcome(self) -> Outcome:
        return evaluate(self.grid)

    @property
    def is_finished(self) -> bool:
        return not isinstance(self.outcome, NoOutcome)

    @property
    def winning_line(self) -> Tuple[int, ...]:
        outcome = self.outcome
        return outcome.line if isinstance(outcome, Win) else ()

    def is_cell_playable(self, index) -> bool:
        """
        true if index is on the board, cell blank and game still running
        """
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if not 0 <= index < CELL_COUNT:
            return False
        return self.grid[index] is Cell.EMPTY and not self.is_finished


def place_mark(state: GameState, index) -> GameState:
    """
    put next player's mark at index and flip the turn
    returns the same state object if the move is not allowed
    """
    if not state.is_cell_playable(index):
        logger.debug("rejected move at %r", index)
        return state
    grid = list(state.grid)
    grid[index] = state.next_player
    logger.info("%s plays cell %d", state.next_player.value, index)
    return replace(state, grid=tuple(grid),
                   next_player=state.next_player.opposite())


def reset() -> GameState:
    """
    fresh board, X to move
    """
    return GameState()


def status_text(state: GameState) -> str:
    """
    'Winner: X', 'Draw' or 'Next: O' style line for the status label
    """
    outcome = state.outcome
    if isinstance(outcome, Win):
        return f"Winner: {outcome.player.value}"
    if isinstance(outcome, Draw):
        return "Draw"
    return f"Next: {state.next_player.value}"
