import logging

from .cipher import decrypt, encrypt, substitute
from .digraphs import ALTERNATE_FILLER, FILLER, Digraph, Mode, normalize, split_digraphs
from .engine import Alignment, classify, column_shift, rectangle, row_shift, substitute_pair
from .errors import CipherError, InvalidKey, InvalidText
from .square import ALPHABET, KeySquare, build_key_square, format_square

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALPHABET", "FILLER", "ALTERNATE_FILLER",
    "KeySquare", "build_key_square", "format_square",
    "Mode", "Digraph", "normalize", "split_digraphs",
    "Alignment", "classify", "row_shift", "column_shift", "rectangle", "substitute_pair",
    "substitute", "encrypt", "decrypt",
    "CipherError", "InvalidKey", "InvalidText",
]
