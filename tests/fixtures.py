# type: ignore
import pytest

from isc.runtime.cpu import CPU
from isc.runtime.trace import Tracer


class RecordingTracer(Tracer):
    def __init__(self):
        self.events = []

    def loaded(self, program):
        self.events.append(('loaded', len(program)))

    def fetched(self, pc, word):
        self.events.append(('fetched', pc, word))

    def executed(self, before, after):
        self.events.append(('executed', before, after))

    def finished(self, stop, cycles):
        self.events.append(('finished', stop, cycles))

    def fetched_pcs(self):
        return [e[1] for e in self.events if e[0] == 'fetched']


@pytest.fixture
def recorder():
    yield RecordingTracer()


@pytest.fixture
def proc(recorder):
    yield CPU(recorder)
