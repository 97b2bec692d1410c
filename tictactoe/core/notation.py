"""Cell labels: row letter a-c followed by column number 1-3, e.g. ``b2``."""
from .game_state import BOARD_CELLS, InvalidMoveError

ROW_LABELS = "abc"
COLUMN_LABELS = "123"


def label_for_position(position: int) -> str:
    if not 0 <= position < BOARD_CELLS:
        raise InvalidMoveError(f"Position {position} is off the board")
    row, col = divmod(position, 3)
    return f"{ROW_LABELS[row]}{COLUMN_LABELS[col]}"


def position_from_label(label: str) -> int:
    """Convert a label such as ``a1`` or ``C3`` to a board position."""
    text = label.strip().lower()
    if len(text) != 2 or text[0] not in ROW_LABELS or text[1] not in COLUMN_LABELS:
        raise InvalidMoveError(
            f"Invalid cell [{label}] - enter a row a, b or c and a column 1, 2 or 3, e.g. a1"
        )
    return ROW_LABELS.index(text[0]) * 3 + COLUMN_LABELS.index(text[1])
