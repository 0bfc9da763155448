import os
import subprocess
import sys
import unittest
from glob import glob

from bimap.utility.logging.utility import setup_logger
from tests.utility import logging_test_name

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class TestExamples(unittest.TestCase):
    def setUp(self) -> None:
        setup_logger()
        logging_test_name(self)

    def test_examples(self):
        basic_examples = glob(os.path.join(REPO_ROOT, "examples", "*.py"))
        self.assertTrue(basic_examples)

        env = dict(os.environ, PYTHONPATH=REPO_ROOT)
        for example in basic_examples:
            result = subprocess.run([sys.executable, example], cwd=REPO_ROOT, env=env)
            self.assertEqual(result.returncode, 0, example)
