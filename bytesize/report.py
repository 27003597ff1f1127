import dataclasses as dc
import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Literal, get_args

from loguru import logger
from rich.table import Table

from bytesize.size import BINARY_UNITS, DECIMAL_UNITS, Byte, ByteSize
from bytesize.utils import cnsl

Mode = Literal['decimal', 'binary', 'both']

UNITS: dict[str, ByteSize] = {'B': Byte, **dict(DECIMAL_UNITS), **dict(BINARY_UNITS)}


def find_unit(suffix: str) -> ByteSize:
    try:
        return UNITS[suffix]
    except KeyError as e:
        msg = f'Unknown unit {suffix!r}, expected one of {list(UNITS)}'
        raise ValueError(msg) from e


def unit_rows(mode: Mode = 'both') -> tuple[tuple[str, ByteSize], ...]:
    match mode:
        case 'decimal':
            return DECIMAL_UNITS
        case 'binary':
            return BINARY_UNITS
        case 'both':
            # interleave KB/KiB, MB/MiB, ... from the largest
            return tuple(
                x
                for pair in zip(DECIMAL_UNITS, BINARY_UNITS, strict=True)
                for x in pair
            )
        case _:
            msg = f'{mode!r} not in {get_args(Mode)}'
            raise ValueError(msg)


@dc.dataclass(frozen=True)
class Config:
    mode: Mode = 'both'
    digits: int = 2
    units: tuple[str, ...] | None = None

    def __post_init__(self):
        rows = dict(unit_rows(self.mode))

        if isinstance(self.digits, bool) or not isinstance(self.digits, int):
            msg = f'digits must be an integer, not {self.digits!r}'
            raise TypeError(msg)
        if self.digits < 0:
            msg = f'digits must be non-negative: {self.digits}'
            raise ValueError(msg)

        if self.units is None:
            return

        if isinstance(self.units, str) or not isinstance(self.units, Iterable):
            msg = f'units must be a list of unit suffixes, not {self.units!r}'
            raise TypeError(msg)

        object.__setattr__(self, 'units', tuple(self.units))
        for suffix in self.units:
            if suffix not in rows:
                msg = (
                    f'{suffix!r} is not a {self.mode} unit, '
                    f'expected one of {list(rows)}'
                )
                raise ValueError(msg)

    @classmethod
    def read(cls, path: str | Path = 'bytesize.toml'):
        conf = tomllib.loads(Path(path).read_text('UTF-8')).get('bytesize', {})
        return cls(**conf)

    def rows(self):
        rows = unit_rows(self.mode)
        if self.units is None:
            return rows

        return tuple(x for x in rows if x[0] in self.units)


def conversion_table(size: ByteSize, conf: Config | None = None) -> Table:
    conf = conf or Config()
    size = ByteSize(size)

    table = Table(title=f'{int(size):,} bytes')
    table.add_column('Unit')
    table.add_column('Value', justify='right')
    table.add_column('Bytes', justify='right')

    for suffix, u in conf.rows():
        table.add_row(suffix, f'{size.to(u):.{conf.digits}f}', f'{int(u):,}')

    return table


def summary_table(sizes: Iterable[int]) -> Table:
    table = Table()
    table.add_column('Bytes', justify='right')
    table.add_column('Decimal', justify='right')
    table.add_column('Binary', justify='right')

    for size in map(ByteSize, sizes):
        table.add_row(
            f'{int(size):,}', size.to_decimal_string(), size.to_binary_string()
        )

    return table


def print_report(size: ByteSize, conf: Config | None = None):
    conf = conf or Config()
    logger.debug('size={!r} | conf={}', size, conf)
    cnsl.print(conversion_table(size=size, conf=conf))
