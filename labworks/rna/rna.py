"""RNA chains packed four nucleotides to a byte."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum
from itertools import chain, islice

_GROWTH_STEP = 32
_CHARS = {0: "A", 1: "G", 2: "C"}


class Nucl(IntEnum):
    """A nucleotide; complementary pairs have complementary bit patterns."""

    A = 0
    G = 1
    C = 2
    T = 3


_NUCLS = {"A": Nucl.A, "G": Nucl.G, "C": Nucl.C}


def nucl_to_char(nucl: int) -> str:
    """Return the letter for a nucleotide code; unknown codes read as 'T'."""
    return _CHARS.get(int(nucl), "T")


def char_to_nucl(symbol: str) -> Nucl:
    """Return the nucleotide for a letter; unknown letters read as T."""
    return _NUCLS.get(symbol, Nucl.T)


def _bytes_for(quantity: int) -> int:
    return (quantity + 3) // 4


def _shift(index: int) -> int:
    return 2 * (3 - index % 4)


def _as_nucl(value: int | str) -> Nucl:
    return char_to_nucl(value) if isinstance(value, str) else Nucl(value)


class RNA:
    """A growable chain of nucleotides stored two bits apiece."""

    __slots__ = ("_chain", "_size", "_capacity")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, nucls: Iterable[int | str] = "") -> None:
        self._chain = bytearray()
        self._size = 0
        self._capacity = 0
        for item in nucls:
            self.add(_as_nucl(item))

    @classmethod
    def repeat(cls, nucl: Nucl, quantity: int) -> RNA:
        """Build a chain of ``quantity`` copies of ``nucl`` with exact capacity."""
        if quantity <= 0:
            return cls()
        return cls._packed((Nucl(nucl) for _ in range(quantity)), quantity)

    @classmethod
    def _packed(cls, nucls: Iterable[Nucl], capacity: int) -> RNA:
        rna = cls()
        rna._capacity = capacity
        rna._chain = bytearray(_bytes_for(capacity))
        count = 0
        for index, nucl in enumerate(nucls):
            rna._write(index, nucl)
            count = index + 1
        rna._size = count
        return rna

    def _read(self, index: int) -> Nucl:
        return Nucl((self._chain[index // 4] >> _shift(index)) & 0x03)

    def _write(self, index: int, nucl: Nucl) -> None:
        shift = _shift(index)
        block = self._chain[index // 4] & (0xFF ^ (0x03 << shift))
        self._chain[index // 4] = block | (int(nucl) << shift)

    def _grow(self, new_capacity: int) -> None:
        missing = _bytes_for(new_capacity) - len(self._chain)
        if missing > 0:
            self._chain.extend(bytes(missing))
        self._capacity = new_capacity

    def _append(self, nucl: Nucl) -> None:
        self._write(self._size, nucl)
        self._size += 1

    def _check_index(self, index: int) -> int:
        if not 0 <= index < self._size:
            raise IndexError(f"nucleotide index {index} out of range")
        return index

    def add(self, nucl: Nucl) -> None:
        """Append a nucleotide, doubling the capacity when it is exhausted."""
        if self._size == self._capacity:
            self._grow(self._capacity * 2 if self._capacity else _GROWTH_STEP)
        self._append(Nucl(nucl))

    def add_plus(self, nucl: Nucl) -> None:
        """Append a nucleotide, growing the capacity by a fixed step."""
        if self._size == self._capacity:
            self._grow(self._capacity + _GROWTH_STEP)
        self._append(Nucl(nucl))

    def split(self, index: int) -> RNA:
        """Return the part of the chain from ``index`` on.

        An index outside the chain gives a copy of the whole chain.
        """
        if self._size == 0:
            return RNA()
        if not 0 <= index < self._size:
            return RNA._packed(self, self._capacity)
        return RNA._packed(islice(self, index, None), self._capacity - index)

    def is_complementary(self, other: RNA) -> bool:
        """Tell whether ``other`` is the complement of this chain."""
        return self == ~other

    def capacity(self) -> int:
        """Number of bytes allocated for the chain."""
        return _bytes_for(self._capacity)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Nucl]:
        return (self._read(index) for index in range(self._size))

    def __str__(self) -> str:
        return "".join(nucl_to_char(nucl) for nucl in self)

    def __repr__(self) -> str:
        return f"RNA({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RNA):
            return NotImplemented
        used = _bytes_for(self._size)
        return self._size == other._size and self._chain[:used] == other._chain[:used]

    def __add__(self, other: RNA) -> RNA:
        if not isinstance(other, RNA):
            return NotImplemented
        if self._size + other._size == 0:
            return RNA()
        return RNA._packed(chain(self, other), self._capacity + other._capacity)

    def __invert__(self) -> RNA:
        return RNA._packed((Nucl(3 - nucl) for nucl in self), self._capacity)

    def __getitem__(self, index: int) -> Nucl:
        return self._read(self._check_index(index))

    def __setitem__(self, index: int, nucl: int | str) -> None:
        self._write(self._check_index(index), _as_nucl(nucl))