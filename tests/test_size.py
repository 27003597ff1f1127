import math
import threading

import pytest

from bytesize import (
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

STRINGS = [
    (0, 0 * Byte, '0B', '0B'),
    (1, 1 * Byte, '1B', '1B'),
    (100, 100 * Byte, '100B', '100B'),
    (999, 999 * Byte, '999B', '999B'),
    (1000, 1 * Kilobyte, '1.00KB', '1000B'),
    (1023, 1023 * Byte, '1.02KB', '1023B'),
    (1024, 1 * Kibibyte, '1.02KB', '1.00KiB'),
    (1000000, 1 * Megabyte, '1.00MB', '976.56KiB'),
    (1048576, 1 * Mebibyte, '1.05MB', '1.00MiB'),
    (1000000000, 1 * Gigabyte, '1.00GB', '953.67MiB'),
    (1073741824, 1 * Gibibyte, '1.07GB', '1.00GiB'),
    (1000000000000, 1 * Terabyte, '1.00TB', '931.32GiB'),
    (1099511627776, 1 * Tebibyte, '1.10TB', '1.00TiB'),
    (1000000000000000, 1 * Petabyte, '1.00PB', '909.49TiB'),
    (1125899906842624, 1 * Pebibyte, '1.13PB', '1.00PiB'),
    (1000000000000000000, 1 * Exabyte, '1.00EB', '888.18PiB'),
    (1152921504606846976, 1 * Exbibyte, '1.15EB', '1.00EiB'),
    # largest int64
    (MAX_SIZE, 7 * Exbibyte + (1 * Exbibyte - 1 * Byte), '9.22EB', '8.00EiB'),
]

CONVERSIONS = [
    ('kibibytes', Kibibyte),
    ('mebibytes', Mebibyte),
    ('gibibytes', Gibibyte),
    ('tebibytes', Tebibyte),
    ('pebibytes', Pebibyte),
    ('exbibytes', Exbibyte),
    ('kilobytes', Kilobyte),
    ('megabytes', Megabyte),
    ('gigabytes', Gigabyte),
    ('terabytes', Terabyte),
    ('petabytes', Petabyte),
    ('exabytes', Exabyte),
]


@pytest.mark.parametrize(('count', 'size', 'decimal', 'binary'), STRINGS)
def test_strings(count, size, decimal, binary):
    s = ByteSize(count)
    assert s == size
    assert str(s) == decimal
    assert s.to_decimal_string() == decimal
    assert s.to_binary_string() == binary
    assert str(BinarySize(count)) == binary


def test_constants():
    assert [int(x) for _, x in BINARY_UNITS] == [1024**i for i in range(6, 0, -1)]
    assert [int(x) for _, x in DECIMAL_UNITS] == [1000**i for i in range(6, 0, -1)]
    assert Byte == 1
    assert Exbibyte == 2**60
    assert all(isinstance(x, ByteSize) for _, x in (*BINARY_UNITS, *DECIMAL_UNITS))


@pytest.mark.parametrize(('name', 'unit'), CONVERSIONS)
def test_conversion_unit(name, unit):
    assert getattr(ByteSize(unit), name) == 1.0
    assert getattr(ByteSize(0), name) == 0.0
    assert getattr(2 * unit + unit // 2, name) == 2.5


@pytest.mark.parametrize('count', [0, 1, 999, 1024, 10**15, MAX_SIZE])
def test_bytes(count):
    b = ByteSize(count).bytes
    assert b == count
    assert type(b) is int


def test_conversion_precision():
    size = ByteSize(1441151880758558720)  # 1.25 EiB

    assert size.exbibytes == pytest.approx(1.25, rel=1e-5)
    assert size.kilobytes == pytest.approx(1441151880758558.75, rel=1e-5)
    assert size.kibibytes == 1407374883553280.0


def test_to():
    assert ByteSize(1536).to(Kibibyte) == 1.5
    assert ByteSize(MAX_SIZE).to(Byte) == float(MAX_SIZE)

    with pytest.raises(ZeroDivisionError):
        ByteSize(1).to(0)


def test_selected_unit_is_monotonic():
    order = ['B'] + [s for s, _ in reversed(DECIMAL_UNITS)]

    def rank(size: ByteSize):
        s = str(size)
        suffix = s.lstrip('0123456789.')
        return order.index(suffix)

    counts = sorted({0, 1, 999, 1000, 999_999, 10**6, 10**9 - 1, 10**12, MAX_SIZE})
    ranks = [rank(ByteSize(x)) for x in counts]
    assert ranks == sorted(ranks)


def test_idempotent():
    size = BinarySize(123_456_789)
    assert str(size) == str(size) == '117.74MiB'


def test_arithmetic():
    assert type(5 * Kilobyte) is ByteSize
    assert 5 * Kilobyte == 5000
    assert type(Kilobyte + 24) is ByteSize
    assert type(24 + Kilobyte) is ByteSize
    assert type(Kilobyte - 1) is ByteSize
    assert type(2000 - Kilobyte) is ByteSize
    assert type(Kibibyte.binary * 2) is BinarySize

    assert 1.5 * Kilobyte == 1500.0
    assert type(1.5 * Kilobyte) is float
    assert type(Kilobyte / 10) is float


def test_views():
    size = ByteSize(1048576)
    binary = size.binary

    assert type(binary) is BinarySize
    assert binary == size
    assert hash(binary) == hash(size)
    assert str(binary) == '1.00MiB'
    assert str(binary.decimal) == '1.05MB'
    assert binary.to_decimal_string() == '1.05MB'
    assert f'{binary}' == '1.00MiB'
    assert f'{size:,d}' == '1,048,576'


def test_comparison():
    assert Kilobyte < Kibibyte < Megabyte < Mebibyte
    assert sorted([Exbibyte, Byte, Exabyte]) == [Byte, Exabyte, Exbibyte]
    assert max(Gigabyte, Gibibyte) is Gibibyte


def test_repr():
    assert repr(ByteSize(1024)) == 'ByteSize(1024)'
    assert repr(BinarySize(1024)) == 'BinarySize(1024)'


@pytest.mark.parametrize('value', [1.5, '1024', None, math.inf])
def test_invalid_value(value):
    with pytest.raises(TypeError, match='integral byte count'):
        ByteSize(value)


def test_thread_safety():
    sizes = [ByteSize(x * 7919) for x in range(1000)]
    expected = [str(x) for x in sizes]
    results: list[list[str]] = []

    def render():
        results.append([str(x) for x in sizes])

    threads = [threading.Thread(target=render) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r == expected for r in results)
