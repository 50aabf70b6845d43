"""Decorators: @safe and @memoize."""

from fnkit.decorators.memo import Memo, memo_key, memoize
from fnkit.decorators.safe import safe

__all__ = [
    'Memo',
    'memo_key',
    'memoize',
    'safe',
]
