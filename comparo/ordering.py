from .types import *


def default_compare(a: Any, b: Any) -> int:
    """natural ordering via < and >, incomparable values count as equal"""
    try:
        if a < b: return -1
        if a > b: return 1
    except (TypeError, ValueError):  # mixed types, ambiguous array truth
        pass
    return 0
