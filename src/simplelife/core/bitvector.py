"""Growable bit vector backed by a packed NumPy byte array."""
import numpy as np


class BitVector:
    """Compact array of booleans indexed from zero.

    Positions never written read as False. Storage grows only when a bit
    is set to True beyond the current capacity.
    """

    def __init__(self, size: int = 0):
        """Initialize the vector.

        Args:
            size: Initial capacity in bits
        """
        self._bytes = np.zeros((size + 7) // 8, dtype=np.uint8)

    def __len__(self) -> int:
        return self._bytes.size * 8

    def _grow(self, index: int) -> None:
        needed = index // 8 + 1
        capacity = max(needed, self._bytes.size * 2)
        grown = np.zeros(capacity, dtype=np.uint8)
        grown[:self._bytes.size] = self._bytes
        self._bytes = grown

    def get(self, index: int) -> bool:
        byte = index >> 3
        if byte >= self._bytes.size:
            return False
        return bool(self._bytes[byte] & (1 << (index & 7)))

    def set(self, index: int, value: bool) -> None:
        byte = index >> 3
        if byte >= self._bytes.size:
            if not value:
                return
            self._grow(index)
        mask = 1 << (index & 7)
        if value:
            self._bytes[byte] |= mask
        else:
            self._bytes[byte] &= ~mask & 0xFF

    def clear(self) -> None:
        """Reset every bit to False, keeping the allocated capacity."""
        self._bytes.fill(0)

    def count(self) -> int:
        """Number of bits set to True."""
        return int(np.unpackbits(self._bytes).sum())
