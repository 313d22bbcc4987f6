"""flagparse — typed long-option parsing for argv-like token lists.

A single pure entry point, :func:`parse_options`, splits tokens into
positional arguments and schema-declared options.
"""

from flagparse.core.models import OptionKind, ParseResult
from flagparse.core.parser import parse_options
from flagparse.version import __version__

__all__: list[str] = [
    "OptionKind",
    "ParseResult",
    "__version__",
    "parse_options",
]
