# ruff: noqa: DOC501

import dataclasses as dc
from pathlib import Path
from typing import Annotated

from cyclopts import App, Group, Parameter
from loguru import logger

from bytesize import MAX_SIZE, ByteSize
from bytesize.report import Config, Mode, find_unit, print_report, summary_table
from bytesize.utils import cnsl, set_logger

app = App(help_format='markdown')
app.meta.group_parameters = Group('Options', sort_key=0)


@app.meta.default
def launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    debug: Annotated[bool, Parameter(name=['--debug', '-d'], negative=[])] = False,
):
    set_logger(level=10 if debug else 20)

    app(tokens)


def _size(count: int, unit: str) -> ByteSize:
    size = ByteSize(count) * find_unit(unit)
    if size > MAX_SIZE:
        logger.warning('{} bytes exceeds the 64-bit range ({})', int(size), MAX_SIZE)

    return size


@app.command
def show(count: list[int], *, unit: str = 'B'):
    """
    바이트 수를 10진(KB, MB, ...)·2진(KiB, MiB, ...) 단위로 출력.

    Parameters
    ----------
    count : list[int]
        바이트 수. `unit` 단위로 해석.
    unit : str, optional
        입력 단위. B, KB, ..., EB, KiB, ..., EiB.
    """
    sizes = [_size(c, unit) for c in count]

    if len(sizes) == 1:
        size = sizes[0]
        logger.debug('size={!r}', size)
        cnsl.print(f'{size.to_decimal_string()} | {size.to_binary_string()}')
        return

    cnsl.print(summary_table(sizes))


@app.command
def table(
    count: int,
    *,
    unit: str = 'B',
    conf: Path | None = None,
    mode: Mode | None = None,
):
    """
    단위별 환산표 출력.

    Parameters
    ----------
    count : int
        바이트 수.
    unit : str, optional
        입력 단위.
    conf : Path | None, optional
        설정 파일 (`[bytesize]` table).
    mode : Mode | None, optional
        decimal, binary, both. 설정 파일보다 우선.
    """
    config = Config.read(conf) if conf else Config()
    if mode is not None:
        config = dc.replace(config, mode=mode)

    print_report(_size(count, unit), config)


def main():
    app.meta()


if __name__ == '__main__':
    main()
