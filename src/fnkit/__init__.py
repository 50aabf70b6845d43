"""fnkit: functional building blocks for Python 3.13+.

Option and Result types, pure list operations, and immutable Collection
and Map containers that chain those operations as methods.

Flat imports (preferred):
    from fnkit import Option, Some, Nothing, Result, Ok, Err, capture
    from fnkit import Collection, Map, lst

Submodule imports (for organization):
    from fnkit.option import Some, Nothing, Option
    from fnkit.result import Ok, Err, Result
    from fnkit.decorators import safe, memoize
"""

from fnkit import lst

# Configuration
from fnkit._config import FunctionalConfig, get_config, init

# Logging
from fnkit._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook

# Assertions
from fnkit.assertions import assert_bool, safe_assert

# Containers
from fnkit.collection import Collection

# Decorators
from fnkit.decorators import Memo, memoize, safe

# Enum helpers
from fnkit.enums import EnumCollectionMixin

# Errors
from fnkit.errors import FunctionalError, ImmutableError, InvariantViolationError, ResultError
from fnkit.map import Map
from fnkit.option import Nothing, NothingType, Option, Some, none, some
from fnkit.result import Err, Ok, Result, capture, error, is_error_like, ok

__all__ = [
    # Containers
    'Collection',
    # Result types
    'Err',
    # Enum helpers
    'EnumCollectionMixin',
    # Configuration
    'FunctionalConfig',
    # Errors
    'FunctionalError',
    'ImmutableError',
    'InvariantViolationError',
    'Map',
    # Decorators
    'Memo',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'ResultError',
    'Some',
    # Logging
    'add_log_hook',
    # Assertions
    'assert_bool',
    'capture',
    'clear_log_hooks',
    'configure_logging',
    'error',
    'get_config',
    'get_logger',
    'init',
    'is_error_like',
    # List operations
    'lst',
    'memoize',
    'none',
    'ok',
    'remove_log_hook',
    'safe',
    'safe_assert',
    'some',
]
