from enum import Enum
from typing import List, NamedTuple


class Stop(Enum):
    HALT = 'halt'
    END_OF_MEMORY = 'end of memory'


class State(NamedTuple):
    pc: int
    flag: int
    halt: bool
    registers: tuple[int, ...]
    memory: tuple[int, ...]


def changes(before: State, after: State) -> List[str]:
    ''' Register, flag and memory deltas of one cycle '''
    deltas = []

    for i, (old, new) in enumerate(zip(before.registers, after.registers)):
        if old != new:
            deltas.append(f'REG[{i}] <- {new}')

    if before.flag != after.flag:
        deltas.append(f'FLAG <- {after.flag}')

    for address, (old, new) in enumerate(zip(before.memory, after.memory)):
        if old != new:
            deltas.append(f'RAM[{address}] <- {new}')

    if after.halt and not before.halt:
        deltas.append('HALT')

    return deltas
