"""Map non-ASCII code points to private single bytes for byte-oriented algorithms."""

from __future__ import annotations

from typing import Dict, Tuple

# Private bytes run from 128 upwards; 127 mappings fit before the byte range ends.
FIRST_PRIVATE_BYTE = 128
MAX_MAPPINGS = 127


class ByteSpaceExhausted(ValueError):
    """Raised when a comparison needs more private bytes than are available."""


class ByteCompactor:
    """Tailored single-byte encoding shared by the strings of one comparison.

    ASCII characters keep their own byte. Every other code point is assigned
    the next free byte in order of first appearance. Create a new instance for
    each comparison: the mapping budget is per instance.
    """

    def __init__(self) -> None:
        self._mapping: Dict[str, int] = {}

    def encode(self, text: str) -> bytes:
        """Encode ``text`` with the current mapping, extending it as needed."""
        encoded = bytearray()
        for char in text:
            code_point = ord(char)
            if code_point < FIRST_PRIVATE_BYTE:
                encoded.append(code_point)
            else:
                encoded.append(self._assign(char))
        return bytes(encoded)

    def compact_pair(self, left: str, right: str) -> Tuple[bytes, bytes]:
        """Encode ``left`` then ``right`` so both share one mapping."""
        return self.encode(left), self.encode(right)

    @property
    def mapping(self) -> Dict[str, int]:
        """Copy of the code point to byte assignments made so far."""
        return dict(self._mapping)

    def _assign(self, char: str) -> int:
        byte = self._mapping.get(char)
        if byte is not None:
            return byte
        if len(self._mapping) >= MAX_MAPPINGS:
            raise ByteSpaceExhausted(
                f"More than {MAX_MAPPINGS} distinct non-ASCII code points in one comparison."
            )
        byte = FIRST_PRIVATE_BYTE + len(self._mapping)
        self._mapping[char] = byte
        return byte


def compact_pair(left: str, right: str) -> Tuple[bytes, bytes]:
    """Compact two strings with a fresh compactor."""
    return ByteCompactor().compact_pair(left, right)
