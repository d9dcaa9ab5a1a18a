"""The fixed 7-bit Hebrew alphabet shared by the normalizer, codec and query compiler.

The order of ``HEBREW_CHARACTERS`` is part of the wire format: a symbol's
position is the value written by the word codec. Never reorder it.
"""

import re
from typing import Dict, Optional

SEPARATOR = " "

SHIN = "\ufb2a"
SIN = "\ufb2b"
BARE_SHIN = "\u05e9"
TAV = "\u05ea"

# All the letters, with shin/sin represented by their two presentation forms:
# alef..resh (U+05D0-U+05E8, including the final forms), shin, sin, tav.
HEBREW_LETTERS = "".join(chr(code) for code in range(0x05D0, 0x05E9)) + SHIN + SIN + TAV

# Points (nikud), excluding meteg (U+05BD) and paseq (U+05C0).
HEBREW_POINTS = (
    "\u05b0\u05b1\u05b2\u05b3\u05b4\u05b5\u05b6\u05b7\u05b8\u05b9\u05ba\u05bb\u05bc\u05bf"
    "\u05c3\u05c4\u05c5\u05c6"
)

# Accents (teamim), including meteg and paseq.
HEBREW_ACCENTS = (
    "\u0591\u0592\u0593\u0594\u0595\u0596\u0597\u0598\u0599\u059a\u059b\u059c\u059d\u059e\u059f"
    "\u05a0\u05a1\u05a3\u05a4\u05a5\u05a6\u05a7\u05a8\u05a9\u05aa\u05ab\u05ac\u05ad\u05ae"
    "\u05bd\u05c0"
)

ZERO_WIDTH_JOINER = "\u200d"

HEBREW_NON_LETTERS = HEBREW_POINTS + HEBREW_ACCENTS + ZERO_WIDTH_JOINER

HEBREW_CHARACTERS = SEPARATOR + HEBREW_LETTERS + HEBREW_NON_LETTERS

FINAL_LETTERS = "ךםןףץ"
REGULAR_LETTERS = "כמנפצ"
FINALS_TO_REGULARS = str.maketrans(FINAL_LETTERS, REGULAR_LETTERS)

if len(HEBREW_CHARACTERS) > 128:
    raise RuntimeError(
        f"Too many Hebrew characters ({len(HEBREW_CHARACTERS)}), cannot encode them in 7 bits"
    )

NON_LETTERS_REGEX = re.compile(f"[^{HEBREW_LETTERS}]")
POINTS_REGEX = re.compile(f"[{HEBREW_POINTS}]")
ACCENTS_REGEX = re.compile(f"[{HEBREW_ACCENTS}]")
HEBREW_NON_LETTERS_REGEX = re.compile(f"[{HEBREW_NON_LETTERS}]")


class Alphabet:
    """Bijective mapping between alphabet symbols and their 7-bit indexes."""

    def __init__(self, symbols: str = HEBREW_CHARACTERS) -> None:
        if len(symbols) > 128:
            raise ValueError(f"Alphabet of {len(symbols)} symbols does not fit in 7 bits")
        if not symbols or symbols[0] != SEPARATOR:
            raise ValueError("Alphabet index 0 must be the word separator")
        self._symbols = symbols
        self._index: Dict[str, int] = {symbol: index for index, symbol in enumerate(symbols)}
        if len(self._index) != len(symbols):
            raise ValueError("Alphabet symbols must be unique")

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._index

    @property
    def symbols(self) -> str:
        return self._symbols

    def index_of(self, symbol: str) -> Optional[int]:
        """Return the index of ``symbol``, or None if it is not in the alphabet."""
        return self._index.get(symbol)

    def symbol_at(self, index: int) -> Optional[str]:
        """Return the symbol at ``index``, or None if there is no such entry."""
        if 0 <= index < len(self._symbols):
            return self._symbols[index]
        return None

    def is_letter(self, symbol: str) -> bool:
        return symbol in HEBREW_LETTERS


HEBREW_ALPHABET = Alphabet()
