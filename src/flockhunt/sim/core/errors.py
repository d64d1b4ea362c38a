"""Exception hierarchy for the predator-prey simulation.

Numeric degeneracies (zero-length vectors, empty flocks, empty populations)
are handled in place and never raise; these types cover caller mistakes.
"""


class FlockhuntError(Exception):
    """Root of all simulation exceptions."""


class ConfigurationError(FlockhuntError, ValueError):
    """Invalid or inconsistent configuration."""


class SimulationError(FlockhuntError):
    """Invalid input handed to a running simulation (elapsed time, agent ids)."""
