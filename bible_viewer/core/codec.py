"""Compact binary codec for words tagged with Strong's numbers.

Byte layout, per word: one byte per symbol holding its alphabet index, the
last symbol's byte with bit 7 set, followed by the tag as two bytes,
big-endian. The buffer is base64-encoded when embedded as a string.
"""

import base64
import binascii
from typing import Iterable, List, Optional, Tuple

from .alphabet import HEBREW_ALPHABET, Alphabet
from .errors import CodecError, EmptyWord, OutOfRange, TruncatedInput, UnknownSymbol

END_OF_WORD = 0x80
SYMBOL_MASK = 0x7F
MAX_TAG = 0xFFFF

TaggedWord = Tuple[str, int]


class WordCodec:
    """Encodes and decodes lists of (word, tag) pairs."""

    def __init__(self, alphabet: Optional[Alphabet] = None) -> None:
        self.alphabet = alphabet or HEBREW_ALPHABET

    def encode(self, tagged_words: Iterable[TaggedWord]) -> bytes:
        """
        Encode (word, tag) pairs into bytes.

        Args:
            tagged_words: Normalized words with their tags

        Returns:
            The encoded buffer

        Raises:
            EmptyWord: if a word has no symbols
            UnknownSymbol: if a word has a symbol outside the alphabet
            OutOfRange: if a tag is outside 0..0xFFFF
        """
        buffer = bytearray()
        for word, tag in tagged_words:
            self._encode_word(word, buffer)
            if not isinstance(tag, int) or tag < 0 or tag > MAX_TAG:
                raise OutOfRange(f"Strong number {tag!r} is out of range")
            buffer.append((tag >> 8) & 0xFF)
            buffer.append(tag & 0xFF)
        return bytes(buffer)

    def _encode_word(self, word: str, buffer: bytearray) -> None:
        if not word:
            raise EmptyWord("Empty word not supported (can't mark last character)")
        last = len(word) - 1
        for offset, char in enumerate(word):
            index = self.alphabet.index_of(char)
            if index is None:
                raise UnknownSymbol(f"Unknown Hebrew character {char!r} in word {word!r}")
            if offset == last:
                index |= END_OF_WORD
            buffer.append(index)

    def decode(self, data: bytes) -> List[TaggedWord]:
        """
        Decode a buffer produced by :meth:`encode`.

        Raises:
            TruncatedInput: if the buffer ends mid-word or mid-tag
            UnknownSymbol: if a symbol index has no alphabet entry
        """
        tagged_words: List[TaggedWord] = []
        offset = 0
        length = len(data)
        while offset < length:
            chars = []
            while True:
                if offset >= length:
                    raise TruncatedInput(f"Unexpected end of data while decoding a word at offset {offset}")
                byte_value = data[offset]
                index = byte_value & SYMBOL_MASK
                char = self.alphabet.symbol_at(index)
                if char is None:
                    raise UnknownSymbol(f"Unknown character index {index} at offset {offset}")
                chars.append(char)
                offset += 1
                if byte_value & END_OF_WORD:
                    break

            if offset + 1 >= length:
                raise TruncatedInput(f"Unexpected end of data while decoding a Strong number at offset {offset}")
            tag = (data[offset] << 8) | data[offset + 1]
            offset += 2

            tagged_words.append(("".join(chars), tag))
        return tagged_words

    def encode_base64(self, tagged_words: Iterable[TaggedWord]) -> str:
        """Encode to the base64 wire string."""
        return base64.b64encode(self.encode(tagged_words)).decode("ascii")

    def decode_base64(self, encoded: str) -> List[TaggedWord]:
        """Decode a base64 wire string."""
        try:
            data = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise CodecError(f"Invalid base64 data: {e}") from e
        return self.decode(data)


default_codec = WordCodec()


def encode(tagged_words: Iterable[TaggedWord]) -> bytes:
    return default_codec.encode(tagged_words)


def decode(data: bytes) -> List[TaggedWord]:
    return default_codec.decode(data)
