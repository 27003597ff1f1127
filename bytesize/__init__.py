from .size import (
    BINARY_UNITS,
    DECIMAL_UNITS,
    MAX_SIZE,
    BinarySize,
    Byte,
    ByteSize,
    Exabyte,
    Exbibyte,
    Gibibyte,
    Gigabyte,
    Kibibyte,
    Kilobyte,
    Mebibyte,
    Megabyte,
    Pebibyte,
    Petabyte,
    Tebibyte,
    Terabyte,
)

__all__ = [
    'BINARY_UNITS',
    'DECIMAL_UNITS',
    'MAX_SIZE',
    'BinarySize',
    'Byte',
    'ByteSize',
    'Exabyte',
    'Exbibyte',
    'Gibibyte',
    'Gigabyte',
    'Kibibyte',
    'Kilobyte',
    'Mebibyte',
    'Megabyte',
    'Pebibyte',
    'Petabyte',
    'Tebibyte',
    'Terabyte',
]
