"""
Error kinds raised by the progress-bar engine.

All of them derive from ConsoleBarError so callers can catch the whole
family at one boundary. Each also derives from the matching builtin, so
code that already handles ValueError / ZeroDivisionError keeps working.
"""


class ConsoleBarError(Exception):
    """Base class for every consolebar failure."""


class ConfigurationError(ConsoleBarError, ValueError):
    """Bar style is not renderable (filled/unfilled token mismatch or empty token)."""


class ZeroTotalError(ConsoleBarError, ZeroDivisionError):
    """A count was rendered against a total of zero."""


class NegativeWidthError(ConsoleBarError, ValueError):
    """A repeat count or width came out negative."""
