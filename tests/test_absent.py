import copy
import pickle
import unittest

from bimap import ABSENT, Absent, AbsentMarkerError, BidirectionalMap
from bimap.utility.logging.utility import setup_logger
from tests.utility import logging_test_name


class TestAbsent(unittest.TestCase):
    def setUp(self) -> None:
        setup_logger()
        logging_test_name(self)

    def test_marker(self):
        self.assertIs(Absent.ABSENT, ABSENT)
        self.assertFalse(ABSENT)
        self.assertEqual(repr(ABSENT), "ABSENT")
        self.assertIsNot(ABSENT, None)
        self.assertIs(copy.deepcopy(ABSENT), ABSENT)
        self.assertIs(pickle.loads(pickle.dumps(ABSENT)), ABSENT)

    def test_falsy_data_is_not_absent(self):
        bidirectional_map = BidirectionalMap([(None, 0), ("", None)])

        self.assertIsNone(bidirectional_map.get_reverse(0))
        self.assertEqual(bidirectional_map.get(None), 0)
        self.assertIsNone(bidirectional_map.get(""))
        self.assertEqual(bidirectional_map.get_reverse(None), "")
        self.assertTrue(bidirectional_map.has(None))
        self.assertTrue(bidirectional_map.has_reverse(0))

    def test_custom_default(self):
        bidirectional_map = BidirectionalMap()
        self.assertIsNone(bidirectional_map.get("missing", None))
        self.assertEqual(bidirectional_map.get_reverse("missing", -1), -1)

    def test_reject_marker(self):
        bidirectional_map = BidirectionalMap([("a", 1)])

        with self.assertRaises(AbsentMarkerError):
            bidirectional_map.set(ABSENT, 1)

        with self.assertRaises(AbsentMarkerError):
            bidirectional_map.set("a", ABSENT)

        # AbsentMarkerError is a ValueError
        with self.assertRaises(ValueError):
            BidirectionalMap([("b", ABSENT)])

        self.assertEqual(list(bidirectional_map), [("a", 1)])
