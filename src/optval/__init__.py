"""optval: an immutable optional-value container for Python 3.13+.

Flat imports (preferred):
    from optval import OptionalValue, Present, Absent, empty, of, of_nullable

Submodule imports (for organization):
    from optval.option import Present, Absent, OptionalValue
    from optval.errors import AbsentValueError, NullConstructionError
    from optval.trace import traced
"""

# Configuration
from optval._config import OptvalConfig, get_config, init

# Logging
from optval._logging import configure_logging, get_logger

# Errors
from optval.errors import AbsentValueError, NullConstructionError, OptvalError

# OptionalValue types
from optval.option import (
    Absent,
    AbsentType,
    OptionalValue,
    Present,
    empty,
    of,
    of_nullable,
)

# Demonstration record
from optval.record import Record

# Tracing
from optval.trace import Traced, traced

__all__ = [
    'Absent',
    'AbsentType',
    'AbsentValueError',
    'NullConstructionError',
    'OptionalValue',
    'OptvalConfig',
    'OptvalError',
    'Present',
    'Record',
    'Traced',
    'configure_logging',
    'empty',
    'get_config',
    'get_logger',
    'init',
    'of',
    'of_nullable',
    'traced',
]
