import os
import tempfile
import unittest

from sparsepoly.common import check_type, typechecked, open_maybe_stdin

@typechecked
def scaled(x : int, k : float) -> float:
    return x * k

@typechecked
def broken(x : int) -> str:
    return x

class TestCommonUtils(unittest.TestCase):

    def test_check_type(self):
        check_type(1, int)
        check_type(1, float)
        check_type(1.5, float)
        check_type("a", str)
        check_type(object(), None)
        with self.assertRaises(TypeError):
            check_type(1.0, int)
        with self.assertRaises(TypeError):
            check_type("1", float)

    def test_typechecked_arguments(self):
        self.assertEqual(scaled(1, 0.5), 0.5)
        self.assertEqual(scaled(x=3, k=2.0), 6.0)
        with self.assertRaises(TypeError):
            scaled(1.5, 2.0)
        with self.assertRaises(TypeError):
            scaled(1, "2")

    def test_typechecked_return(self):
        with self.assertRaises(TypeError):
            broken(1)

    def test_open_maybe_stdin_file(self):
        fd, path = tempfile.mkstemp(text=True)
        try:
            with os.fdopen(fd, "w") as f:
                f.write("2 1 1 1 0\n")
            with open_maybe_stdin(path) as f:
                self.assertEqual(f.read(), "2 1 1 1 0\n")
        finally:
            os.remove(path)
