import numpy as np
import pandas as pd
import suite
from dgen import from_schema
from comparo import compare

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# test data schemas
product_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 500}),
    'name': 'word',
    'price': ('pyfloat', {'min_value': 5.0, 'max_value': 500.0, 'right_digits': 2}),
    'category': {'_qen_provider': 'choice', 'from': ['electronics', 'books', 'clothing']}
}

# helper data
products = from_schema(product_schema, seed=99).take(25)
by_category_then_price = compare.on('category').then(compare.on('price').reverse())


# python sorting interop

@test("key plugs into the builtin sorted")
def test_key_sorted():
    result = sorted([3, 1, 2], key=compare().reverse().to.key())
    assert_that(result == [3, 2, 1], "sorted should honour the comparator")


@test("list returns a sorted copy")
def test_list_copy():
    data = [3, 1, 2]
    result = compare().to.list(data)
    assert_that(result == [1, 2, 3], "should be sorted")
    assert_that(data == [3, 1, 2], "input should be untouched")


@test("list sorting is stable")
def test_list_stable():
    data = [('b', 1), ('a', 1), ('c', 0)]
    assert_that(compare.on(1).to.list(data) == [('c', 0), ('b', 1), ('a', 1)], "ties keep input order")


@test("min and max follow the ordering")
def test_min_max():
    longest_first = compare.on(len).reverse()
    words = ['pear', 'fig', 'banana']
    assert_that(longest_first.to.min(words) == 'banana', "min is first under the ordering")
    assert_that(longest_first.to.max(words) == 'fig', "max is last under the ordering")
    assert_raises(ValueError, lambda: compare().to.min([]), "empty input should raise")


@test("is_sorted detects order")
def test_is_sorted():
    assert_that(compare().to.is_sorted([1, 2, 2, 3]), "ascending with ties is sorted")
    assert_that(not compare().to.is_sorted([1, 3, 2]), "out of order pair detected")
    assert_that(compare().to.is_sorted([]), "empty input is sorted")
    assert_that(by_category_then_price.to.is_sorted(by_category_then_price.to.list(products)),
                "sorted generated records should pass")


# numpy

@test("argsort returns stable intp indices")
def test_argsort():
    idx = compare().reverse().to.argsort([10, 30, 20, 30])
    assert_that(idx.dtype == np.intp, "indices should be intp")
    assert_that(idx.tolist() == [1, 3, 2, 0], "descending with stable ties")


@test("array sorts a numpy array")
def test_array_1d():
    arr = np.array([5, -3, 1, -8])
    result = compare.on(abs).to.array(arr)
    assert_that(isinstance(result, np.ndarray), "should return an ndarray")
    assert_that(result.tolist() == [1, -3, 5, -8], "sorted by magnitude")


@test("array compares rows of a 2d array")
def test_array_2d():
    arr = np.array([[2, 1], [1, 9], [2, 0]])
    result = compare.on(0).then(compare.on(1)).to.array(arr)
    assert_that(result.tolist() == [[1, 9], [2, 0], [2, 1]], "rows sorted by both columns")


@test("array rejects scalars")
def test_array_scalar():
    assert_raises(ValueError, lambda: compare().to.array(np.int64(3)))


# pandas

@test("series reorders values and keeps the index")
def test_series():
    s = pd.Series([3, None, 1], index=['x', 'y', 'z'])
    cmp = compare().append(lambda v: v is None or v != v)  # nan after to_list
    result = compare().to.series(pd.Series([3, 1, 2], index=['a', 'b', 'c']))
    assert_that(result.index.tolist() == ['b', 'c', 'a'], "index should travel with values")
    missing_last = cmp.to.series(s)
    assert_that(missing_last.index.tolist() == ['z', 'x', 'y'], "missing value should be last")


@test("frame reorders rows using column names")
def test_frame():
    df = pd.DataFrame(products)
    result = by_category_then_price.to.frame(df)
    assert_that(len(result) == len(df), "no rows lost")
    records = result.to_dict('records')
    assert_that(records == by_category_then_price.to.list(products), "same order as sorting the records")
    assert_that(set(result.index) == set(df.index), "original index preserved")


if __name__ == "__main__":
    suite.run(title="comparo terminal test suite")
