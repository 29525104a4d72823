class RunSettings:
    cycle_delay: float  # seconds between cycles
    trace: bool

    def __init__(self):
        self.cycle_delay = 0.0
        self.trace = False

    def update(
        self,
        cycle_delay: float | None = None,
        trace: bool | None = None
    ):
        if cycle_delay is not None:
            if cycle_delay < 0:
                raise ValueError(f'Negative cycle delay {cycle_delay}')

            self.cycle_delay = cycle_delay

        if trace is not None:
            self.trace = trace

        return self
