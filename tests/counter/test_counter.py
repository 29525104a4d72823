from isc.common.hwconf import FLAG_EQ
import isc.runtime.emulator as emulator

import unit_utils


def test_counter():
    program = unit_utils.assemble_file('counter/counter.asm')
    proc = emulator.execute(program)

    assert len(program) == 7
    assert list(proc.gp) == [0, 1, 8, 0]
    assert proc.memory[18] == 8
    assert proc.flag == FLAG_EQ
    # Two loads, seven passes of add cmp jlt, then sto and hlt
    assert proc.cycles == 2 + 7 * 3 + 2
