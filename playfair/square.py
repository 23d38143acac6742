import logging
import string
from typing import Dict, Iterator, List, Tuple

from .errors import InvalidKey

logger = logging.getLogger(__name__)

# 25 letters, I and J share a cell
ALPHABET = "abcdefghiklmnopqrstuvwxyz"
SIZE = 5

Coordinate = Tuple[int, int]


def normalize_key(keyword: str) -> str:
    """
    Lowercase the keyword and merge j into i.
    Raises InvalidKey if anything outside a-z remains.
    """
    keyword = keyword.lower().replace('j', 'i')
    bad = sorted(set(ch for ch in keyword if ch not in string.ascii_lowercase))
    if bad:
        raise InvalidKey(f"Keyword contains characters outside a-z: {''.join(bad)!r}")
    return keyword


def key_sequence(keyword: str) -> str:
    """
    Build the 25-letter key sequence.
    Keyword letters come first in first-occurrence order (duplicates dropped),
    then the remaining ALPHABET letters in natural order.
    """
    keyword = "".join(dict.fromkeys(normalize_key(keyword)))
    remaining = "".join(letter for letter in ALPHABET if letter not in keyword)
    return keyword + remaining


class KeySquare:
    """
    The 5x5 Playfair key square.

    Letters are laid out row-major: the letter at sequence position i sits at
    row i // 5, column i % 5, and its linear index is i. The square is
    read-only once built.
    """

    __slots__ = ("_letters", "_coordinates", "_indices")

    def __init__(self, letters: str):
        if len(letters) != SIZE * SIZE or set(letters) != set(ALPHABET):
            raise ValueError("Key square needs each of the 25 alphabet letters exactly once.")
        coordinates: Dict[str, Coordinate] = {}
        indices: Dict[str, int] = {}
        for i, letter in enumerate(letters):
            coordinates[letter] = divmod(i, SIZE)
            indices[letter] = i
        object.__setattr__(self, "_letters", letters)
        object.__setattr__(self, "_coordinates", coordinates)
        object.__setattr__(self, "_indices", indices)

    def __setattr__(self, name, value):
        raise AttributeError("KeySquare is immutable")

    @property
    def letters(self) -> str:
        return self._letters

    def coordinate(self, letter: str) -> Coordinate:
        return self._coordinates[letter]

    def index(self, letter: str) -> int:
        return self._indices[letter]

    def letter_at(self, index: int) -> str:
        if not 0 <= index < SIZE * SIZE:
            raise IndexError(f"Linear index {index} outside 0..24")
        return self._letters[index]

    def letter_at_coordinate(self, row: int, column: int) -> str:
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise IndexError(f"Coordinate ({row}, {column}) outside the 5x5 grid")
        return self._letters[row * SIZE + column]

    def rows(self) -> List[str]:
        return [self._letters[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def __contains__(self, letter) -> bool:
        return letter in self._indices

    def __iter__(self) -> Iterator[str]:
        return iter(self._letters)

    def __len__(self) -> int:
        return len(self._letters)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeySquare):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __repr__(self) -> str:
        return f"KeySquare({self._letters!r})"


def build_key_square(keyword: str) -> KeySquare:
    """Derive the key square for a keyword. An empty keyword gives ALPHABET order."""
    square = KeySquare(key_sequence(keyword))
    logger.debug(f"Built key square {square.letters} from keyword of length {len(keyword)}")
    return square


def format_square(square: KeySquare) -> str:
    """
    Render the square as a table, e.g. for keyword "monarchy":

     M  O  N  A  R
     C  H  Y  B  D
     ...
    """
    return "\n".join(" " + " ".join(f"{letter.upper():2}" for letter in row).rstrip()
                     for row in square.rows())
