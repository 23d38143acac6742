import logging
from enum import Enum
from typing import Sequence

from .digraphs import Digraph, Mode
from .square import KeySquare, SIZE

logger = logging.getLogger(__name__)

LAST_ROW = SIZE * (SIZE - 1)  # 20, first index of the bottom row


class Alignment(Enum):
    ROW = "row"
    COLUMN = "column"
    NEITHER = "neither"


def classify(pair: Sequence[str], square: KeySquare) -> Alignment:
    """
    Same column (different rows) -> COLUMN, same row (different columns) -> ROW.
    Anything else, including a pair of identical letters, is NEITHER.
    """
    r1, c1 = square.coordinate(pair[0])
    r2, c2 = square.coordinate(pair[1])
    if c1 == c2 and r1 != r2:
        return Alignment.COLUMN
    if r1 == r2 and c1 != c2:
        return Alignment.ROW
    return Alignment.NEITHER


def row_shift(letter: str, square: KeySquare, mode: Mode) -> str:
    """Move one cell right (ENCRYPT) or left (DECRYPT), wrapping inside the row."""
    idx = square.index(letter)
    row_start = idx - idx % SIZE
    return square.letter_at(row_start + (idx % SIZE + mode.value) % SIZE)


def column_shift(letter: str, square: KeySquare, mode: Mode) -> str:
    """Move one cell down (ENCRYPT) or up (DECRYPT), wrapping inside the column."""
    idx = square.index(letter)
    if mode is Mode.ENCRYPT:
        idx = idx + SIZE if idx < LAST_ROW else idx - LAST_ROW
    else:
        idx = idx - SIZE if idx >= SIZE else idx + LAST_ROW
    return square.letter_at(idx)


def rectangle(pair: Sequence[str], square: KeySquare) -> Digraph:
    """Swap columns across the rectangle the pair spans. Self-inverse."""
    r1, c1 = square.coordinate(pair[0])
    r2, c2 = square.coordinate(pair[1])
    return Digraph(square.letter_at_coordinate(r1, c2), square.letter_at_coordinate(r2, c1))


def substitute_pair(pair: Sequence[str], square: KeySquare, mode: Mode) -> Digraph:
    """Substitute one digraph. A filler flag on the input is carried to the output."""
    filler = pair.filler if isinstance(pair, Digraph) else False
    alignment = classify(pair, square)
    if alignment is Alignment.ROW:
        a, b = row_shift(pair[0], square, mode), row_shift(pair[1], square, mode)
    elif alignment is Alignment.COLUMN:
        a, b = column_shift(pair[0], square, mode), column_shift(pair[1], square, mode)
    else:
        a, b, _ = rectangle(pair, square)
    return Digraph(a, b, filler)
