import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from sorting import builtin_sort, insertion_sort, merge_sort, INSERTION_SORT_THRESHOLD


def by_value(a, b):
    return (a > b) - (a < b)


def by_key(a, b):
    return by_value(a[0], b[0])


class TestMergeSort(unittest.TestCase):
    def test_small_list(self):
        data = [4, 2, 5, 1, 3]
        merge_sort(data, by_value)
        self.assertEqual(data, [1, 2, 3, 4, 5])

    def test_large_list(self):
        data = [(i * 37) % 101 for i in range(200)]
        expected = sorted(data)
        merge_sort(data, by_value)
        self.assertEqual(data, expected)

    def test_already_sorted_and_reversed(self):
        ascending = list(range(INSERTION_SORT_THRESHOLD * 4))
        descending = ascending[::-1]
        merge_sort(ascending, by_value)
        merge_sort(descending, by_value)
        self.assertEqual(ascending, list(range(INSERTION_SORT_THRESHOLD * 4)))
        self.assertEqual(descending, ascending)

    def test_stable(self):
        data = [(i % 7, i) for i in range(100)]
        expected = sorted(data, key=lambda pair: pair[0])
        merge_sort(data, by_key)
        self.assertEqual(data, expected)

    def test_empty_and_single(self):
        empty = []
        merge_sort(empty, by_value)
        self.assertEqual(empty, [])
        single = ["a"]
        merge_sort(single, by_value)
        self.assertEqual(single, ["a"])

    def test_duplicates(self):
        data = [3, 1, 3, 1, 2, 2] * 10
        expected = sorted(data)
        merge_sort(data, by_value)
        self.assertEqual(data, expected)

    def test_requires_callable(self):
        with self.assertRaises(ValueError):
            merge_sort([2, 1], "not a comparator")

    def test_comparator_error_propagates(self):
        def boom(a, b):
            raise KeyError("bad")

        data = [2, 1]
        with self.assertRaises(KeyError):
            merge_sort(data, boom)
        self.assertEqual(data, [2, 1])


class TestInsertionSort(unittest.TestCase):
    def test_sorts_whole_sequence(self):
        data = [5, 4, 3, 2, 1]
        insertion_sort(data, by_value)
        self.assertEqual(data, [1, 2, 3, 4, 5])

    def test_sorts_sub_range(self):
        data = [9, 5, 4, 3, 0]
        insertion_sort(data, by_value, 1, 4)
        self.assertEqual(data, [9, 3, 4, 5, 0])

    def test_stable(self):
        data = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
        insertion_sort(data, by_key)
        self.assertEqual(data, [(0, "b"), (0, "d"), (1, "a"), (1, "c")])

    def test_bad_range_raises(self):
        with self.assertRaises(IndexError):
            insertion_sort([1, 2], by_value, 0, 3)
        with self.assertRaises(IndexError):
            insertion_sort([1, 2], by_value, 2, 1)


class TestBuiltinSort(unittest.TestCase):
    def test_sorts(self):
        data = [(i * 13) % 17 for i in range(40)]
        expected = sorted(data)
        builtin_sort(data, by_value)
        self.assertEqual(data, expected)

    def test_stable(self):
        data = [(i % 3, i) for i in range(30)]
        expected = sorted(data, key=lambda pair: pair[0])
        builtin_sort(data, by_key)
        self.assertEqual(data, expected)

    def test_matches_merge_sort(self):
        data = [(i * 7) % 11 for i in range(50)]
        other = list(data)
        builtin_sort(data, by_value)
        merge_sort(other, by_value)
        self.assertEqual(data, other)

    def test_requires_callable(self):
        with self.assertRaises(ValueError):
            builtin_sort([1], None)


if __name__ == "__main__":
    unittest.main()
