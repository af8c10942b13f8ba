from __future__ import annotations
import typing
from ..types import *
from ..ordering import default_compare

if typing.TYPE_CHECKING:
    from ..comparator import Comparator


def _partitioned(func: Comparer[T], predicate: Predicate[Any],
                 handler: Optional[Comparer[Any]], matched_first: bool) -> Comparer[Any]:
    """build a comparer that keeps predicate matches in a block of their own"""
    inner = handler if handler is not None else default_compare
    # sign of a matching value against a non-matching one
    lead = -1 if matched_first else 1

    def compare_partitioned(a, b):
        a_matches, b_matches = predicate(a), predicate(b)
        if a_matches and b_matches:
            return inner(a, b)
        if a_matches:
            return lead
        if b_matches:
            return -lead
        return func(a, b)

    return compare_partitioned


class _PartitionOperations(Generic[T]):
    def append(self: 'Comparator[T]', predicate: Predicate[Any],
               handler: Optional[Comparer[Any]] = None) -> 'Comparator[Any]':
        """
        order values matching the predicate after everything else.
        matches are ordered among themselves by the handler (natural order by default),
        the rest by this comparator.
        """
        from ..comparator import Comparator
        return Comparator(_partitioned(self._get_func(), predicate, handler, matched_first=False))

    def prepend(self: 'Comparator[T]', predicate: Predicate[Any],
                handler: Optional[Comparer[Any]] = None) -> 'Comparator[Any]':
        """order values matching the predicate before everything else"""
        from ..comparator import Comparator
        return Comparator(_partitioned(self._get_func(), predicate, handler, matched_first=True))
