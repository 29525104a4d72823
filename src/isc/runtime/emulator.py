import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Sequence

import click

import isc.common.binfile as binfile
from isc.runtime.cpu import CPU
from isc.runtime.memory import ExecutionError
from isc.runtime.settings import RunSettings
from isc.runtime.trace import Tracer, LoggingTracer


EXIT_HALT = 0
EXIT_KEYBOARD = 3
EXIT_BAD_BINARY = 4
EXIT_EXEC_ERROR = 100


def make_tracer(settings: RunSettings) -> Tracer:
    return LoggingTracer() if settings.trace else Tracer()


def execute(program: Sequence[int], settings: RunSettings | None = None) -> CPU:
    settings = settings if settings is not None else RunSettings()
    proc = CPU(make_tracer(settings), settings)
    proc.run(program)
    return proc


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--trace', is_flag=True, help='Trace every cycle (implies --verbose)')
@click.option('-d', '--delay', type=click.FloatRange(min=0.0), default=0.0,
              envvar='ISC_CYCLE_DELAY', show_default=True, help='Seconds to pause between cycles')
@click.argument('binary_filename', type=Path)
def run(verbose: bool, trace: bool, delay: float, binary_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info('ISC')

    settings = RunSettings().update(cycle_delay=delay, trace=trace)
    proc = CPU(make_tracer(settings), settings)

    try:
        program = binfile.read_program(binary_filename)
        stop = proc.run(program)
        lg.info(f'Execution stopped on {stop.value}')
        lg.info(' '.join(f'R{i}:{v}' for i, v in enumerate(proc.gp)) + f' FLAG:{proc.flag}')
        sys.exit(EXIT_HALT)

    except binfile.SerializeError as e:
        lg.info(f'Unable to load {binary_filename}: {e}')
        sys.exit(EXIT_BAD_BINARY)

    except ExecutionError as e:
        lg.info(f'Execution halted on error: {e}')
        proc.debug_dump()
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
