''' Register file and memory banks

Code and data share the memory bank: a program is copied from address 0 and
sto/lod may overwrite any address, including the program itself.
'''

from typing import Iterable, List

from isc.common.hwconf import REGISTER_COUNT, MEMORY_SIZE, WORD_MASK


class ExecutionError(Exception):
    pass


class AddressOutOfRange(ExecutionError):
    def __init__(self, bank: str, index: int, size: int):
        super().__init__(f'{bank} index {index} is out of range 0..{size - 1}')
        self.bank = bank
        self.index = index


class ProgramTooLarge(ExecutionError):
    def __init__(self, length: int):
        super().__init__(f'Program of {length} words does not fit {MEMORY_SIZE} words of memory')
        self.length = length


class Bank:
    name = 'bank'
    cells: List[int]

    def __init__(self, size: int):
        self.cells = [0] * size

    def check(self, index: int):
        if not 0 <= index < len(self.cells):
            raise AddressOutOfRange(self.name, index, len(self.cells))

    def __getitem__(self, index: int) -> int:
        self.check(index)
        return self.cells[index]

    def __setitem__(self, index: int, value: int):
        self.check(index)
        self.cells[index] = value & WORD_MASK

    def __len__(self):
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def clear(self):
        self.cells = [0] * len(self.cells)

    def dump(self) -> tuple[int, ...]:
        return tuple(self.cells)


class Registers(Bank):
    name = 'register'

    def __init__(self):
        super().__init__(REGISTER_COUNT)


class Memory(Bank):
    name = 'memory'

    def __init__(self):
        super().__init__(MEMORY_SIZE)

    def load(self, words: Iterable[int]):
        words = list(words)

        if len(words) > len(self.cells):
            raise ProgramTooLarge(len(words))

        for address, word in enumerate(words):
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f'Word {word} at {address} does not fit 32 bits')

        self.cells[:len(words)] = words
