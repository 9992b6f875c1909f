import unittest

from maybepy import some, none, of_nullable


def identity(x):
    return x


f = lambda x: x + 1
g = lambda x: x * 10
safe_inv = lambda x: none() if x == 0 else some(1 / x)
halve_even = lambda x: some(x // 2) if x % 2 == 0 else none()

SAMPLES = [some(0), some(4), some(7), none()]


class TestFunctorLaws(unittest.TestCase):
    def test_identity(self):
        for m in SAMPLES:
            self.assertEqual(m.map(identity), m)

    def test_composition(self):
        for m in SAMPLES:
            self.assertEqual(m.map(f).map(g), m.map(lambda x: g(f(x))))


class TestMonadLaws(unittest.TestCase):
    def test_left_identity(self):
        for x in (0, 4, 7):
            self.assertEqual(some(x).flat_map(halve_even), halve_even(x))

    def test_right_identity(self):
        for m in SAMPLES:
            self.assertEqual(m.flat_map(some), m)

    def test_associativity(self):
        for m in SAMPLES:
            self.assertEqual(
                m.flat_map(halve_even).flat_map(safe_inv),
                m.flat_map(lambda x: halve_even(x).flat_map(safe_inv)),
            )

    def test_of_nullable_is_filtered_some(self):
        for x in (None, 0, "a"):
            self.assertEqual(of_nullable(x), some(x).filter(lambda v: v is not None))
