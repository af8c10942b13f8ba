from __future__ import annotations
import typing
from functools import cmp_to_key
from itertools import pairwise
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..comparator import Comparator


class TerminalAccessor(Generic[T]):
    def __init__(self, comparator_instance: 'Comparator[T]'):
        self._comparator = comparator_instance

    def key(self) -> Callable[[T], Any]:
        """key class for sorted(), min(), max(), heapq and friends"""
        return cmp_to_key(self._comparator._get_func())

    def list(self, data: Iterable[T]) -> List[T]:
        """sorted copy of the data, stable"""
        return sorted(data, key=self.key())

    def min(self, data: Iterable[T]) -> T:
        """first element under this ordering"""
        return min(data, key=self.key())

    def max(self, data: Iterable[T]) -> T:
        """last element under this ordering"""
        return max(data, key=self.key())

    def is_sorted(self, data: Iterable[T]) -> bool:
        """check that no adjacent pair is out of order"""
        func = self._comparator._get_func()
        return all(func(a, b) <= 0 for a, b in pairwise(data))

    # --- numpy / pandas ---

    def argsort(self, values: Iterable[T]) -> np.ndarray:
        """indices that would sort the values, like np.argsort but with this comparator"""
        items = [*values]
        key = self.key()
        order = sorted(range(len(items)), key=lambda i: key(items[i]))
        return np.array(order, dtype=np.intp)

    def array(self, values: Iterable[T]) -> np.ndarray:
        """sorted numpy array (rows are compared whole for 2d input)"""
        arr = np.asarray(values)
        if arr.ndim == 0:
            raise ValueError("cannot sort a 0-d array")
        return arr[self.argsort(arr.tolist())]

    def series(self, series: pd.Series) -> pd.Series:
        """reorder a series by its values, keeping the index"""
        return series.iloc[self.argsort(series.to_list())]

    def frame(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        reorder dataframe rows. each row is handed to the comparator as a
        {column: value} dict, so compare.on('column') works directly.
        """
        return df.iloc[self.argsort(df.to_dict('records'))]
