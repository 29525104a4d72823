''' Flat little-endian program images '''

import struct
import logging as lg
from pathlib import Path
from typing import Iterable, List

from isc.common.hwconf import WORD_SIZE, WORD_MASK


class SerializeError(Exception):
    pass


class TruncatedInput(SerializeError):
    def __init__(self, length: int):
        super().__init__(f'Binary of {length} bytes is not a whole number of {WORD_SIZE}-byte words')
        self.length = length


class WordOutOfRange(SerializeError):
    def __init__(self, index: int, word: int):
        super().__init__(f'Word {index} ({word}) does not fit 32 bits')
        self.index = index
        self.word = word


def words_to_bytes(words: Iterable[int]) -> bytes:
    bytestr = bytearray()

    for index, word in enumerate(words):
        if not 0 <= word <= WORD_MASK:
            raise WordOutOfRange(index, word)

        bytestr += struct.pack('<I', word)

    return bytes(bytestr)


def bytes_to_words(data: bytes) -> List[int]:
    if len(data) % WORD_SIZE != 0:
        raise TruncatedInput(len(data))

    return [word for (word,) in struct.iter_unpack('<I', data)]


def read_program(path: Path) -> List[int]:
    lg.debug(f'Reading program {path}')
    return bytes_to_words(path.read_bytes())


def write_program(path: Path, words: Iterable[int]):
    data = words_to_bytes(words)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    lg.debug(f'Written {len(data)} bytes to {path}')
