import logging
import unittest

from bimap import BidirectionalMap


def logging_test_name(obj: unittest.TestCase):
    logging.info(f"{obj.__class__.__name__}:{obj._testMethodName} ==============================================")


def assert_consistent(test: unittest.TestCase, bidirectional_map: BidirectionalMap):
    pairs = list(bidirectional_map)
    for key, value in pairs:
        test.assertTrue(_same(bidirectional_map.get(key), value), f"{key=} does not map to {value=}")
        test.assertTrue(_same(bidirectional_map.get_reverse(value), key), f"{value=} does not map back to {key=}")

    test.assertEqual(bidirectional_map.size, len(pairs))
    test.assertEqual(len(bidirectional_map._reverse), len(pairs))
    test.assertEqual(len({value for _, value in pairs}), len(pairs))


def _same(left, right) -> bool:
    # identity first, like dict lookups, so nan matches itself
    return left is right or left == right
