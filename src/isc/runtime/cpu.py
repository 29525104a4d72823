import time
import logging as lg
from typing import Sequence

import isc.common.ops as ops
import isc.common.codec as codec
from isc.common.hwconf import LAST_ADDRESS, FLAG_UNSET, FLAG_GT, FLAG_EQ, FLAG_LT
from isc.runtime.memory import Registers, Memory
from isc.runtime.settings import RunSettings
from isc.runtime.state import State, Stop
from isc.runtime.trace import Tracer


def to_signed(value: int) -> int:
    return value - (1 << 32) if value & 0x80000000 else value


class CPU():
    pc: int  # Program counter
    flag: int  # Last compare result
    halt: bool
    gp: Registers  # General purpose registers
    memory: Memory
    cycles: int  # Cycles executed by the last run

    def __init__(self, tracer: Tracer | None = None, settings: RunSettings | None = None):
        self.tracer = tracer if tracer is not None else Tracer()
        self.settings = settings if settings is not None else RunSettings()

        self.gp = Registers()
        self.memory = Memory()

        self.pc = 0
        self.flag = FLAG_UNSET
        self.halt = False
        self.cycles = 0

    # - Helpers - #

    def snapshot(self) -> State:
        return State(self.pc, self.flag, self.halt, self.gp.dump(), self.memory.dump())

    def debug_dump(self):
        state = [f'PC:{self.pc}', f'FLAG:{self.flag}']
        state.extend([f'R{i}:{v}' for i, v in enumerate(self.gp)])
        lg.debug(' '.join(state))

    def branch(self, flag: int, target: int):
        # Lands on target after the cycle epilogue advances PC
        if self.flag == flag:
            self.pc = target - 1
            self.flag = FLAG_UNSET

    # - Operations - #

    def nop(self):
        pass

    def ldi(self, value: int, dst: int):
        self.gp[dst] = value

    def add(self, a: int, b: int, c: int):
        self.gp[c] = self.gp[a] + self.gp[b]

    def sub(self, a: int, b: int, c: int):
        self.gp[c] = self.gp[a] - self.gp[b]

    def cmp(self, value: int, reg: int):
        diff = to_signed(self.gp[reg]) - value

        if diff > 0:
            self.flag = FLAG_GT
        elif diff == 0:
            self.flag = FLAG_EQ
        else:
            self.flag = FLAG_LT

    def jmp(self, target: int):
        self.pc = target

    def jeq(self, target: int):
        self.branch(FLAG_EQ, target)

    def jgt(self, target: int):
        self.branch(FLAG_GT, target)

    def jlt(self, target: int):
        self.branch(FLAG_LT, target)

    def sto(self, addr: int, src: int):
        self.memory[addr] = self.gp[src]

    def lod(self, addr: int, dst: int):
        self.gp[dst] = self.memory[addr]

    def hlt(self):
        self.halt = True

    HANDLERS = {
        ops.NOP: nop,
        ops.LDI: ldi,
        ops.ADD: add,
        ops.SUB: sub,
        ops.CMP: cmp,
        ops.JMP: jmp,
        ops.JEQ: jeq,
        ops.JGT: jgt,
        ops.JLT: jlt,
        ops.STO: sto,
        ops.LOD: lod,
        ops.HLT: hlt
    }

    # -- Implementation -- #

    def reset(self):
        self.gp.clear()
        self.memory.clear()
        self.pc = 0
        self.flag = FLAG_UNSET
        self.halt = False
        self.cycles = 0

    def load(self, program: Sequence[int]):
        self.memory.load(program)
        self.tracer.loaded(program)

    def exec_next(self):
        word = self.memory[self.pc]
        self.tracer.fetched(self.pc, word)

        before = self.snapshot()
        opcode, operand = codec.decode(word)
        handler = self.HANDLERS.get(opcode)

        # Unknown opcodes are reserved and execute as no-ops
        if handler is not None:
            handler(self, *codec.unpack_operand(opcode, operand))

        self.tracer.executed(before, self.snapshot())

    def run(self, program: Sequence[int] | None = None) -> Stop:
        if program is not None:
            self.load(program)

        self.cycles = 0

        while True:
            self.exec_next()
            self.cycles += 1

            if self.halt or self.pc == LAST_ADDRESS:
                stop = Stop.HALT if self.halt else Stop.END_OF_MEMORY
                self.pc = 0
                self.halt = False
                self.tracer.finished(stop, self.cycles)
                return stop

            self.pc += 1

            if self.settings.cycle_delay > 0:
                time.sleep(self.settings.cycle_delay)
