import math
from datetime import date
import suite
from dgen import from_schema
from comparo import default_compare, compare

test = suite.test
assert_that = suite.assert_that
assert_order = suite.assert_order

number_schema = ('pyint', {'min_value': -50, 'max_value': 50})
word_schema = 'word'


# default_compare() tests

@test("default_compare orders numbers")
def test_default_numbers():
    assert_that(default_compare(1, 2) == -1, "1 should precede 2")
    assert_that(default_compare(2, 1) == 1, "2 should follow 1")
    assert_that(default_compare(2, 2) == 0, "equal numbers should tie")
    assert_that(default_compare(1, 1.0) == 0, "int and float of equal value should tie")


@test("default_compare orders strings by code point")
def test_default_strings():
    assert_that(default_compare('apple', 'banana') == -1, "apple before banana")
    assert_that(default_compare('B', 'a') == -1, "uppercase code points come first")
    assert_that(default_compare('', 'a') == -1, "empty string first")


@test("default_compare orders dates and tuples")
def test_default_dates_tuples():
    assert_that(default_compare(date(2020, 1, 1), date(2021, 1, 1)) == -1, "earlier date first")
    assert_that(default_compare((1, 'b'), (1, 'a')) == 1, "tuples compare lexicographically")


@test("default_compare is antisymmetric on generated values")
def test_default_antisymmetry():
    numbers = from_schema(number_schema, seed=11).take(30)
    words = from_schema(word_schema, seed=12).take(30)
    for values in (numbers, words):
        for a in values:
            assert_that(default_compare(a, a) == 0, f"{a!r} should tie with itself")
            for b in values:
                if a != b:
                    assert_that(default_compare(a, b) == -default_compare(b, a),
                                f"antisymmetry broken for {a!r}, {b!r}")


@test("default_compare treats incomparable values as equal")
def test_default_incomparable():
    assert_that(default_compare(1, None) == 0, "int vs None should not raise")
    assert_that(default_compare(None, 1) == 0, "None vs int should not raise")
    assert_that(default_compare('a', 1) == 0, "str vs int should not raise")
    assert_that(default_compare({1}, {2}) == 0, "unrelated sets are neither subset nor superset")


@test("default_compare treats nan as equal to everything")
def test_default_nan():
    assert_that(default_compare(math.nan, 1.0) == 0, "nan vs number")
    assert_that(default_compare(1.0, math.nan) == 0, "number vs nan")


@test("compare() without arguments uses natural ordering")
def test_compare_default():
    natural = compare()
    assert_order(natural, 1, 2, -1)
    assert_order(natural, 'b', 'a', 1)
    assert_that(natural(3, 3) == 0, "equal values tie")


if __name__ == "__main__":
    suite.run(title="comparo ordering test suite")
