import typing
from .types import *
from .collation import LocaleCollator, CollatorOptions

if typing.TYPE_CHECKING:
    from .comparator import Comparator


def _project(item: Any, key: Any) -> Any:
    """field lookup: subscript for mappings and integer keys, attribute otherwise"""
    if isinstance(item, Mapping) or isinstance(key, int):
        return item[key]
    return getattr(item, key)


class _CompareFactory:
    """builds comparators: compare(), compare.on(...), compare.locale(...)"""

    def __call__(self, func: Optional[Comparer[T]] = None) -> 'Comparator[T]':
        """wrap a comparer, or natural ordering when none is given"""
        from .comparator import Comparator
        return Comparator(func)

    def on(self, transform_or_key: Union[Selector[T, Any], Any]) -> 'Comparator[T]':
        """natural ordering of a projected value, given a function or a field name"""
        if callable(transform_or_key):
            return self().map(transform_or_key)
        return self().map(lambda item: _project(item, transform_or_key))

    def locale(self, locales: Union[str, Sequence[str], None] = None,
               options: Union[CollatorOptions, Mapping[str, Any], None] = None) -> 'Comparator[str]':
        """language-sensitive string ordering, see LocaleCollator"""
        return self.collate(LocaleCollator(locales, options))

    def collate(self, collator: Collator) -> 'Comparator[str]':
        """string ordering delegated to any object with compare_strings(a, b)"""
        if not isinstance(collator, Collator):
            raise TypeError(f"collator must provide compare_strings(a, b), got {type(collator).__name__}")
        return self(collator.compare_strings)


# --- aliases ---
compare = _CompareFactory()
C = compare
