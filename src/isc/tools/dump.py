from pathlib import Path
from typing import List

import click

import isc.common.binfile as binfile
import isc.common.dis as dis
from isc.common.hwconf import INSTRUCTION_BITS


def binary_listing(words: List[int]) -> List[str]:
    return [f'({address}) - [{word:0{INSTRUCTION_BITS}b}]' for address, word in enumerate(words)]


def hex_bytes(data: bytes) -> str:
    return ' '.join(f'{byte:02X}' for byte in data)


@click.command()
@click.option('--hex', 'show_hex', is_flag=True, help='Print raw bytes as hex too')
@click.argument('binary', type=Path)
def dump(show_hex: bool, binary: Path):
    data = binary.read_bytes()

    try:
        words = binfile.bytes_to_words(data)
    except binfile.SerializeError as e:
        raise click.ClickException(str(e))

    if show_hex:
        click.echo(hex_bytes(data))

    for line in binary_listing(words):
        click.echo(line)

    for line in dis.disassemble_program(words):
        click.echo(line)


if __name__ == '__main__':
    dump()
