from __future__ import annotations
import typing
from ..types import *
from ..ordering import default_compare

if typing.TYPE_CHECKING:
    from ..comparator import Comparator


class _CoreOperations(Generic[T]):
    def reverse(self: 'Comparator[T]') -> 'Comparator[T]':
        """invert the order by swapping the operands"""
        from ..comparator import Comparator
        func = self._get_func()
        return Comparator(lambda a, b: func(b, a))

    def map(self: 'Comparator[T]', transform: Selector[U, T]) -> 'Comparator[U]':
        """compare values of a new domain by projecting them into this one"""
        from ..comparator import Comparator
        func = self._get_func()
        return Comparator(lambda a, b: func(transform(a), transform(b)))

    def then(self: 'Comparator[T]', handler: Optional[Comparer[U]] = None) -> 'Comparator[T]':
        """
        break ties with a secondary comparer.
        the handler is consulted only when this comparator reports zero.
        """
        from ..comparator import Comparator
        func = self._get_func()
        tie_break = handler if handler is not None else default_compare

        def chained(a, b):
            result = func(a, b)
            if result != 0:
                return result
            return tie_break(a, b)

        return Comparator(chained)
