import logging as lg
from typing import Sequence

import isc.common.codec as codec
import isc.common.dis as dis
from isc.runtime.state import State, Stop, changes


class Tracer:
    ''' Execution observer, ignores everything '''

    def loaded(self, program: Sequence[int]):
        pass

    def fetched(self, pc: int, word: int):
        pass

    def executed(self, before: State, after: State):
        pass

    def finished(self, stop: Stop, cycles: int):
        pass


class LoggingTracer(Tracer):
    def loaded(self, program: Sequence[int]):
        lg.debug(f'Program loaded ({len(program)} words)')

    def fetched(self, pc: int, word: int):
        opcode, operand = codec.decode(word)
        lg.debug(f'[PC -> {pc}] {dis.disassemble_long(word)}')
        lg.debug(f'OPCODE: {opcode:04b} OPERAND: {operand:018b}')

    def executed(self, before: State, after: State):
        for change in changes(before, after):
            lg.debug(change)

    def finished(self, stop: Stop, cycles: int):
        lg.info(f'Execution finished on {stop.value} after {cycles} cycles')
