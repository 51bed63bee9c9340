"""consolebar — in-place text progress bars for the terminal"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("consolebar")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "consolebar"

from consolebar.bar import ProgressBar, RenderContext  # noqa: E402
from consolebar.errors import (  # noqa: E402
    ConfigurationError,
    ConsoleBarError,
    NegativeWidthError,
    ZeroTotalError,
)
from consolebar.fixed import CountModel, FixedWidthProgressBar, InformativeProgressBar  # noqa: E402
from consolebar.style import BarStyle  # noqa: E402

__all__ = [
    "BarStyle",
    "ConfigurationError",
    "ConsoleBarError",
    "CountModel",
    "FixedWidthProgressBar",
    "InformativeProgressBar",
    "NegativeWidthError",
    "ProgressBar",
    "RenderContext",
    "ZeroTotalError",
    "__version__",
]
