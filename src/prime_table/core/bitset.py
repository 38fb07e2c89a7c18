"""Fixed-capacity bit-packed boolean container.

Bits are packed eight to a byte in little bit order: bit ``i`` lives in
byte ``i // 8`` at offset ``i % 8``. This is the layout produced by
``np.packbits(..., bitorder="little")`` and read back by
``np.unpackbits(..., bitorder="little")``.

Padding bits past the capacity are always zero, so two sets with the same
capacity and the same logical bits have identical byte buffers.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

import numpy as np

from prime_table.errors import ConstructionError


def byte_length(capacity: int) -> int:
    """Number of bytes needed to hold ``capacity`` bits."""
    return (capacity + 7) // 8


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ConstructionError(f"Capacity must be >= 0, got {capacity}")
    return int(capacity)


class PackedBitSet:
    """An ordered, fixed-length sequence of booleans stored one bit each.

    The capacity is fixed at creation. There is no public way to flip a
    bit; new sets are produced by the constructors below or by
    :func:`prime_table.core.merge.merge_tables`.

    Attributes:
        capacity: Number of bits in the set.
    """

    __slots__ = ("_capacity", "_data")

    def __init__(self, capacity: int):
        """Create a set of ``capacity`` bits, all false.

        Raises:
            ConstructionError: If capacity is negative.
        """
        self._capacity = _check_capacity(capacity)
        self._data = np.zeros(byte_length(self._capacity), dtype=np.uint8)

    @classmethod
    def _wrap(cls, data: np.ndarray, capacity: int) -> PackedBitSet:
        obj = cls.__new__(cls)
        obj._capacity = capacity
        obj._data = data
        return obj

    @classmethod
    def from_bools(cls, bits: Iterable[bool], capacity: Optional[int] = None) -> PackedBitSet:
        """Build a set from a sequence of booleans.

        Bits are assigned in order from index 0. If the sequence is shorter
        than the capacity, the remaining bits are false.

        Args:
            bits: Booleans (or truthy values) to store.
            capacity: Capacity of the new set. Defaults to ``len(bits)``.

        Raises:
            ConstructionError: If the sequence is longer than the capacity.
        """
        flags = np.fromiter(bits, dtype=bool)
        if capacity is None:
            capacity = len(flags)
        capacity = _check_capacity(capacity)

        if len(flags) > capacity:
            raise ConstructionError(
                f"Got {len(flags)} bits for a set of capacity {capacity}"
            )

        padded = np.zeros(capacity, dtype=bool)
        padded[:len(flags)] = flags
        return cls._wrap(np.packbits(padded, bitorder="little"), capacity)

    @classmethod
    def from_int(cls, value: int, capacity: int) -> PackedBitSet:
        """Build a set whose bit ``i`` is ``(value >> i) & 1``.

        Raises:
            ConstructionError: If value is negative or has bits set at or
                beyond the capacity.
        """
        capacity = _check_capacity(capacity)
        value = int(value)
        if value < 0:
            raise ConstructionError(f"Value must be >= 0, got {value}")
        if value >> capacity:
            raise ConstructionError(
                f"Value {value:#x} does not fit in {capacity} bits"
            )

        data = np.zeros(byte_length(capacity), dtype=np.uint8)
        for k in range(len(data)):
            data[k] = (value >> (8 * k)) & 0xFF
        return cls._wrap(data, capacity)

    @classmethod
    def from_bytes(cls, data: bytes, capacity: int) -> PackedBitSet:
        """Adopt an already packed buffer.

        Raises:
            ConstructionError: If the buffer length does not match the
                capacity or a padding bit is set.
        """
        capacity = _check_capacity(capacity)
        buf = np.frombuffer(bytes(data), dtype=np.uint8).copy()

        if len(buf) != byte_length(capacity):
            raise ConstructionError(
                f"Expected {byte_length(capacity)} bytes for capacity {capacity}, got {len(buf)}"
            )
        tail = capacity % 8
        if tail and int(buf[-1]) >> tail:
            raise ConstructionError("Padding bits past capacity must be zero")

        return cls._wrap(buf, capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def nbytes(self) -> int:
        """Size of the packed buffer in bytes."""
        return int(self._data.nbytes)

    def __len__(self) -> int:
        return self._capacity

    def __getitem__(self, index: int) -> bool:
        if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Bit index must be an integer, got {type(index).__name__}")
        index = int(index)
        if not 0 <= index < self._capacity:
            raise IndexError(f"Bit index must be in [0, {self._capacity}), got {index}")
        return bool((int(self._data[index >> 3]) >> (index & 7)) & 1)

    def get(self, index: int) -> bool:
        """Read the bit at ``index``. Same as ``bitset[index]``."""
        return self[index]

    def __iter__(self) -> Iterator[bool]:
        for flag in self.to_bools():
            yield bool(flag)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackedBitSet):
            return NotImplemented
        return self._capacity == other._capacity and np.array_equal(self._data, other._data)

    def __hash__(self) -> int:
        return hash((self._capacity, self._data.tobytes()))

    def __repr__(self) -> str:
        return f"PackedBitSet(capacity={self._capacity}, set={self.count()})"

    def copy(self) -> PackedBitSet:
        """Return an independent copy."""
        return self._wrap(self._data.copy(), self._capacity)

    def to_bools(self) -> np.ndarray:
        """Unpack into a new boolean array of length ``capacity``."""
        return np.unpackbits(self._data, count=self._capacity, bitorder="little").astype(bool)

    def to_bytes(self) -> bytes:
        """Packed buffer as bytes."""
        return self._data.tobytes()

    def count(self) -> int:
        """Number of set bits."""
        return int(np.count_nonzero(self.to_bools()))

    def set_indices(self) -> np.ndarray:
        """Indices of the set bits, ascending."""
        return np.flatnonzero(self.to_bools())

    def _or_inplace(self, other: PackedBitSet) -> None:
        # Only the merger calls this, on an accumulator it owns.
        np.bitwise_or(self._data, other._data, out=self._data)
