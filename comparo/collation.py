"""
locale-aware string collation on top of the host `locale` facility.

strings are compared level by level, the way icu collators do it:
primary (base letters), secondary (accents), tertiary (case).
the `sensitivity` option decides which levels take part.
"""
from __future__ import annotations

import locale
import logging
import re
import threading
import unicodedata
from contextlib import contextmanager
from functools import lru_cache
from dataclasses import dataclass
from .types import *
from .ordering import default_compare

logger = logging.getLogger(__name__)

SENSITIVITIES = ('base', 'accent', 'case', 'variant')
CASE_FIRST = ('upper', 'lower', 'false')

_DIGIT_RUN = re.compile(r'(\d+)')
_KEY_CACHE_SIZE = 4096

# LC_COLLATE is process wide, every switch goes through this lock
_locale_lock = threading.RLock()


@dataclass(frozen=True)
class CollatorOptions:
    """options understood by LocaleCollator"""
    sensitivity: str = 'variant'
    numeric: bool = False
    ignore_punctuation: bool = False
    case_first: str = 'false'

    def __post_init__(self):
        if self.sensitivity not in SENSITIVITIES:
            raise ValueError(f"sensitivity must be one of {SENSITIVITIES}, got '{self.sensitivity}'")
        if self.case_first not in CASE_FIRST:
            raise ValueError(f"case_first must be one of {CASE_FIRST}, got '{self.case_first}'")

    @classmethod
    def coerce(cls, options: Union['CollatorOptions', Mapping[str, Any], None]) -> 'CollatorOptions':
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls(**options)
        raise TypeError(f"options must be CollatorOptions or a mapping, got {type(options).__name__}")


@contextmanager
def _collating(name: Optional[str]) -> Iterator[None]:
    """hold the locale lock, with LC_COLLATE switched to `name` if given"""
    with _locale_lock:
        if name is None:
            yield
            return
        previous = locale.setlocale(locale.LC_COLLATE)
        locale.setlocale(locale.LC_COLLATE, name)
        try:
            yield
        finally:
            locale.setlocale(locale.LC_COLLATE, previous)


def _candidate_names(tag: str) -> List[str]:
    """bcp 47 tags like en-US are also tried as posix names"""
    names = [tag]
    posix = tag.replace('-', '_')
    if posix != tag:
        names.append(posix)
    if '.' not in posix and posix not in ('C', 'POSIX'):
        names.append(f"{posix}.UTF-8")
    return names


def _resolve_locale(locales: Union[str, Sequence[str], None]) -> Optional[str]:
    """first locale name the host accepts; None means the current locale"""
    if locales is None:
        return None
    locales = [locales] if isinstance(locales, str) else list(locales)
    if not locales:
        return None

    last_error: Optional[locale.Error] = None
    with _locale_lock:
        previous = locale.setlocale(locale.LC_COLLATE)
        try:
            for tag in locales:
                for name in _candidate_names(tag):
                    try:
                        locale.setlocale(locale.LC_COLLATE, name)
                    except locale.Error as e:
                        logger.debug(f"locale '{name}' rejected: {e}")
                        last_error = e
                        continue
                    logger.debug(f"collating with locale '{name}' (requested {locales})")
                    return name
        finally:
            locale.setlocale(locale.LC_COLLATE, previous)
    raise last_error


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize('NFD', text)
    return unicodedata.normalize('NFC', ''.join(ch for ch in decomposed if not unicodedata.combining(ch)))


def _is_ignorable(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch).startswith('P')


class LocaleCollator:
    """
    compares strings by the collation rules of a host locale.

    :param locales: a locale name, a list of names tried in order, or None for the
                    current LC_COLLATE. bcp 47 tags (en-US) are accepted too.
    :param options: CollatorOptions or a mapping of its fields.
    :raises locale.Error: when the host supports none of the requested locales.
    """

    def __init__(self, locales: Union[str, Sequence[str], None] = None,
                 options: Union[CollatorOptions, Mapping[str, Any], None] = None):
        self._options = CollatorOptions.coerce(options)
        self._locale = _resolve_locale(locales)
        self._cached_key = lru_cache(maxsize=_KEY_CACHE_SIZE)(self._build_key)

    @property
    def resolved_locale(self) -> Optional[str]:
        return self._locale

    @property
    def options(self) -> CollatorOptions:
        return self._options

    def _chunks(self, text: str) -> Tuple[Tuple[int, Any], ...]:
        # digits sort before letters; with numeric on, digit runs compare by value
        if not self._options.numeric:
            return ((1, locale.strxfrm(text)),)
        # split() with a capture group puts the digit runs at odd indices
        return tuple((0, int(part)) if i % 2 else (1, locale.strxfrm(part))
                     for i, part in enumerate(_DIGIT_RUN.split(text)) if part)

    def _case_marks(self, text: str) -> Tuple[int, ...]:
        upper_rank, lower_rank = (1, 2) if self._options.case_first == 'upper' else (2, 1)
        return tuple(upper_rank if ch.isupper() else lower_rank if ch.islower() else 0
                     for ch in _strip_accents(text))

    def sort_key(self, text: str) -> Tuple[Any, ...]:
        """
        key whose natural order matches compare_strings.
        keys are cached per collator, so sorting n strings switches the locale
        at most n times rather than once per comparison.
        """
        return self._cached_key(unicodedata.normalize('NFC', text))

    def _build_key(self, text: str) -> Tuple[Any, ...]:
        opts = self._options
        if opts.ignore_punctuation:
            text = ''.join(ch for ch in text if not _is_ignorable(ch))

        with _collating(self._locale):
            levels: List[Any] = [self._chunks(_strip_accents(text).casefold())]
            if opts.sensitivity in ('accent', 'variant'):
                levels.append(self._chunks(text.casefold()))
        if opts.sensitivity in ('case', 'variant'):
            levels.append(self._case_marks(text))
        return tuple(levels)

    def compare_strings(self, a: str, b: str) -> int:
        return default_compare(self.sort_key(a), self.sort_key(b))

    def __repr__(self) -> str:
        return f"LocaleCollator(locale={self._locale!r}, options={self._options})"
