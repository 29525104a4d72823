import sys
from pathlib import Path
import logging as lg
from typing import Tuple

import click

from isc.sasm.asm import CompilationItem, compile_items
from isc.sasm.errors import AssemblyFailed
import isc.common.binfile as binfile
from isc.common.hwconf import MEMORY_SIZE


EXIT_ASSEMBLY_ERROR = 1


def collect_file(filepath: str | Path) -> CompilationItem:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Collecting file {filepath}')
    return CompilationItem(filepath.read_text(encoding='utf-8'), str(filepath))


def collect_files(filepaths: list[Path]) -> list[CompilationItem]:
    return [collect_file(path) for path in filepaths]


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('sources', nargs=-1, required=True, type=Path)
@click.argument('binary', type=Path)
def compile(verbose: bool, sources: Tuple[Path], binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('ISC ASM')

    items = collect_files(list(sources))

    try:
        words = compile_items(items)

    except AssemblyFailed as e:
        for error in e.errors:
            click.echo(str(error), err=True)

        lg.info(f'Assembly failed with {len(e.errors)} error(s)')
        sys.exit(EXIT_ASSEMBLY_ERROR)

    if len(words) > MEMORY_SIZE:
        lg.warning(f'Program of {len(words)} words does not fit {MEMORY_SIZE} words of memory')

    binfile.write_program(binary, words)
    lg.info(f'{len(words)} words written to {binary}')


if __name__ == '__main__':
    compile()
