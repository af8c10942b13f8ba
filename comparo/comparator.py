from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .ordering import default_compare

# --- derivations ---
from .extensions.core import _CoreOperations
from .extensions.partition import _PartitionOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IComparator(ABC, Generic[T]):
    @abstractmethod
    def _get_func(self) -> Comparer[T]:
        """get the underlying two-argument comparer"""
        pass

# --- base comparator implementation ---

class _BaseComparator(IComparator[T]):
    def __init__(self, func: Optional[Comparer[T]] = None):
        """init with a plain comparer; a Comparator is unwrapped instead of nested"""
        if isinstance(func, IComparator):
            func = func._get_func()
        self._func = func if func is not None else default_compare

    def _get_func(self) -> Comparer[T]:
        return self._func

    def __call__(self, a: T, b: T) -> Number:
        return self._func(a, b)

    def __repr__(self) -> str:
        name = getattr(self._func, '__qualname__', type(self._func).__name__)
        return f"Comparator(func={name})"

# --- main comparator class ---

class Comparator(
    _BaseComparator[T],
    _CoreOperations[T],
    _PartitionOperations[T]
):
    """a composable two-argument ordering function."""
    def __init__(self, func: Optional[Comparer[T]] = None):
        super().__init__(func)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
