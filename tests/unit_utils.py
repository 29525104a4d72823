from pathlib import Path

import isc.sasm.asm as asm
import isc.runtime.emulator as emulator
from isc.runtime.cpu import CPU


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def assemble_file(filename: str) -> list[int]:
    return asm.compile_string(load_file(filename), filename)


def execute_source(source: str) -> CPU:
    return emulator.execute(asm.compile_string(source))
