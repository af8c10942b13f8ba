r"""
'     ___ ___  _ __ ___  _ __   __ _ _ __ ___
'    / __/ _ \| '_ ` _ \| '_ \ / _` | '__/ _ \
'   | (_| (_) | | | | | | |_) | (_| | | | (_) |
'    \___\___/|_| |_| |_| .__/ \__,_|_|  \___/
'                       |_|
"""

# expose the main classes
from .comparator import Comparator, IComparator

# expose the factory
from .factories import compare, C

# expose natural ordering and collation
from .ordering import default_compare
from .collation import LocaleCollator, CollatorOptions

# expose supporting types
from .types import Comparer, Collator

# define what `import *` does
__all__ = [
    "Comparator",
    "IComparator",
    "compare",
    "C",
    "default_compare",
    "LocaleCollator",
    "CollatorOptions",
    "Comparer",
    "Collator"
]
