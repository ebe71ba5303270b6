"""
Error types raised by the split simulator.
"""


class SimulationError(Exception):
    """Base class for every error raised by the simulator."""


class InvalidInputError(SimulationError, ValueError):
    """Caller supplied arguments the simulator cannot work with."""


class InvalidHandError(InvalidInputError):
    """The held cards are not exactly 13 distinct, well-formed cards."""


class NoValidSplitError(SimulationError, RuntimeError):
    """No 3/5/5 split of the hand satisfies front <= middle <= back."""


class SimulationCancelled(SimulationError):
    """A cancel signal was observed between candidate splits."""
