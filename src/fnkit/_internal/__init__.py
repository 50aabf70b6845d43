"""Internal helpers shared by the list, collection and map modules."""

from fnkit._internal.calling import adapt, required_positional

__all__ = ['adapt', 'required_positional']
