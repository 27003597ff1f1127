"""Byte counts and their decimal (KB, MB, ...) and binary (KiB, MiB, ...) forms."""

from __future__ import annotations

import operator
from typing import ClassVar, SupportsIndex

MAX_SIZE = 2**63 - 1


class ByteSize(int):
    """
    Immutable count of bytes.

    `str()` renders the count with the largest decimal unit not exceeding it,
    e.g. `ByteSize(1048576)` -> `'1.05MB'`. Use `BinarySize` (or `.binary`)
    for kibibytes, mebibytes and so on.
    """

    __slots__ = ()

    _UNITS: ClassVar[tuple[tuple[str, ByteSize], ...]]

    def __new__(cls, value: SupportsIndex = 0):
        try:
            count = operator.index(value)
        except TypeError as e:
            msg = f'{cls.__name__} requires an integral byte count, not {value!r}'
            raise TypeError(msg) from e

        return super().__new__(cls, count)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({int(self)})'

    def __str__(self) -> str:
        return _render(self, self._UNITS)

    def _wrap(self, value):
        return type(self)(value) if isinstance(value, int) else value

    def __add__(self, other):
        return self._wrap(int.__add__(self, other))

    def __radd__(self, other):
        return self._wrap(int.__radd__(self, other))

    def __sub__(self, other):
        return self._wrap(int.__sub__(self, other))

    def __rsub__(self, other):
        return self._wrap(int.__rsub__(self, other))

    def __mul__(self, other):
        return self._wrap(int.__mul__(self, other))

    def __rmul__(self, other):
        return self._wrap(int.__rmul__(self, other))

    @property
    def binary(self) -> BinarySize:
        return BinarySize(self)

    @property
    def decimal(self) -> ByteSize:
        return ByteSize(self)

    def to_decimal_string(self) -> str:
        return _render(self, DECIMAL_UNITS)

    def to_binary_string(self) -> str:
        return _render(self, BINARY_UNITS)

    def to(self, unit: SupportsIndex) -> float:
        """
        Size as a (fractional) number of `unit`.

        The integer quotient is kept exact and only the remainder is divided as
        a float, so counts far above 2**53 bytes do not lose their low digits.
        """
        u = operator.index(unit)
        whole, part = divmod(int(self), u)
        return whole + part / u

    @property
    def bytes(self) -> int:
        return int(self)

    @property
    def kibibytes(self) -> float:
        return self.to(Kibibyte)

    @property
    def kilobytes(self) -> float:
        return self.to(Kilobyte)

    @property
    def mebibytes(self) -> float:
        return self.to(Mebibyte)

    @property
    def megabytes(self) -> float:
        return self.to(Megabyte)

    @property
    def gibibytes(self) -> float:
        return self.to(Gibibyte)

    @property
    def gigabytes(self) -> float:
        return self.to(Gigabyte)

    @property
    def tebibytes(self) -> float:
        return self.to(Tebibyte)

    @property
    def terabytes(self) -> float:
        return self.to(Terabyte)

    @property
    def pebibytes(self) -> float:
        return self.to(Pebibyte)

    @property
    def petabytes(self) -> float:
        return self.to(Petabyte)

    @property
    def exbibytes(self) -> float:
        return self.to(Exbibyte)

    @property
    def exabytes(self) -> float:
        return self.to(Exabyte)


class BinarySize(ByteSize):
    """Same count of bytes as `ByteSize`, printed as KiB, MiB, GiB, ..."""

    __slots__ = ()


def _render(size: int, units: tuple[tuple[str, ByteSize], ...]) -> str:
    for suffix, unit in units:
        if size >= unit:
            return f'{size / unit:.2f}{suffix}'

    return f'{int(size)}B'


Byte = ByteSize(1)
Kibibyte = ByteSize(1024**1)
Mebibyte = ByteSize(1024**2)
Gibibyte = ByteSize(1024**3)
Tebibyte = ByteSize(1024**4)
Pebibyte = ByteSize(1024**5)
Exbibyte = ByteSize(1024**6)

Kilobyte = ByteSize(1000**1)
Megabyte = ByteSize(1000**2)
Gigabyte = ByteSize(1000**3)
Terabyte = ByteSize(1000**4)
Petabyte = ByteSize(1000**5)
Exabyte = ByteSize(1000**6)

# largest first
DECIMAL_UNITS: tuple[tuple[str, ByteSize], ...] = (
    ('EB', Exabyte),
    ('PB', Petabyte),
    ('TB', Terabyte),
    ('GB', Gigabyte),
    ('MB', Megabyte),
    ('KB', Kilobyte),
)
BINARY_UNITS: tuple[tuple[str, ByteSize], ...] = (
    ('EiB', Exbibyte),
    ('PiB', Pebibyte),
    ('TiB', Tebibyte),
    ('GiB', Gibibyte),
    ('MiB', Mebibyte),
    ('KiB', Kibibyte),
)

ByteSize._UNITS = DECIMAL_UNITS  # noqa: SLF001
BinarySize._UNITS = BINARY_UNITS  # noqa: SLF001
