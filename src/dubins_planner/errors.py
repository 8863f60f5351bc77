# src/dubins_planner/errors.py
"""
Exceptions raised by the Dubins planner.

Every error kind also derives from the builtin exception a caller would
naturally catch (``ValueError`` for bad inputs, ``IndexError`` for a bad
segment index), so ``except ValueError`` keeps working for code written
against plain builtins.
"""


class DubinsError(Exception):
    """Base class for all planner errors."""


class InvalidRadius(DubinsError, ValueError):
    """Turning radius is not a positive finite number."""


class NoPath(DubinsError, ValueError):
    """No path word connects the two poses."""


class ParamOutOfRange(DubinsError, ValueError):
    """Arc-length parameter lies outside the path."""


class InvalidStep(DubinsError, ValueError):
    """Sampling step is not a positive finite number."""


class IndexOutOfRange(DubinsError, IndexError):
    """Segment index is not one of 0, 1, 2."""
