import math
import unittest

import numpy as np

from planevec.errors import InvalidNumberError
from planevec.math.vector import Vector


class ConstructorTests(unittest.TestCase):
    def test_defaults_to_zero(self) -> None:
        vec = Vector()
        self.assertEqual(vec.x, 0)
        self.assertEqual(vec.y, 0)

    def test_axes_from_arguments(self) -> None:
        vec = Vector(10, 100)
        self.assertEqual(vec.x, 10)
        self.assertEqual(vec.y, 100)

    def test_rejects_invalid_components(self) -> None:
        for args in ((None, 1), (1, math.inf), (math.nan, 0), ("1", 2), (True, 0)):
            with self.assertRaises(InvalidNumberError):
                Vector(*args)

    def test_iterates_over_components(self) -> None:
        x, y = Vector(3, 4)
        self.assertEqual((x, y), (3, 4))

    def test_equality_is_exact_and_vectors_are_unhashable(self) -> None:
        self.assertEqual(Vector(1, 2), Vector(1, 2))
        self.assertNotEqual(Vector(1, 2), Vector(1, 2.0000001))
        with self.assertRaises(TypeError):
            hash(Vector(1, 2))


class FactoryTests(unittest.TestCase):
    def test_from_array(self) -> None:
        vec = Vector.from_array([100, 200])
        self.assertEqual(vec.to_array(), [100, 200])

    def test_from_array_accepts_numpy_arrays(self) -> None:
        vec = Vector.from_array(np.array([1.5, -2.0]))
        self.assertEqual(vec.x, 1.5)
        self.assertEqual(vec.y, -2.0)

    def test_from_array_requires_two_numbers(self) -> None:
        invalid = ([0], [None, 1], [1, None], ["a", None], ["1", 1], [1, "1"])
        for values in invalid:
            with self.assertRaises(InvalidNumberError):
                Vector.from_array(values)

    def test_from_array_rejects_non_sequences(self) -> None:
        for values in (None, 5, 1.5):
            with self.assertRaises(InvalidNumberError):
                Vector.from_array(values)

    def test_from_object(self) -> None:
        vec = Vector.from_object({"x": 100, "y": 200})
        self.assertEqual((vec.x, vec.y), (100, 200))
        copied = Vector.from_object(Vector(3, 4))
        self.assertEqual((copied.x, copied.y), (3, 4))

    def test_from_object_requires_numeric_x_and_y(self) -> None:
        invalid = (
            {"x": 1},
            {"y": 1},
            {"foo": 1},
            {"x": None, "y": 1},
            {"x": "a", "y": 1},
            {"x": "1", "y": 1},
            {"x": 1, "y": "1"},
        )
        for payload in invalid:
            with self.assertRaises(InvalidNumberError):
                Vector.from_object(payload)

    def test_from_polar(self) -> None:
        vec = Vector.from_polar(0, 10)
        self.assertEqual((vec.x, vec.y), (10, 0))

        vec = Vector.from_polar(math.pi / 2, 100)
        self.assertAlmostEqual(vec.x, 0)
        self.assertEqual(vec.y, 100)

        vec = Vector.from_polar(-math.pi / 2, 1)
        self.assertAlmostEqual(vec.x, 0)
        self.assertEqual(vec.y, -1)

    def test_from_polar_negative_magnitude_reflects_through_origin(self) -> None:
        vec = Vector.from_polar(0, -2)
        self.assertAlmostEqual(vec.x, -2)
        self.assertAlmostEqual(vec.y, 0)

    def test_from_polar_quadrants(self) -> None:
        root = math.sqrt(2)
        cases = (
            (math.pi / 4, root, root),
            (3 * math.pi / 4, -root, root),
            (5 * math.pi / 4, -root, -root),
            (7 * math.pi / 4, root, -root),
            (-math.pi / 4, root, -root),
            (-3 * math.pi / 4, -root, -root),
        )
        for angle, x, y in cases:
            vec = Vector.from_polar(angle, 2)
            self.assertAlmostEqual(vec.x, x)
            self.assertAlmostEqual(vec.y, y)

    def test_from_polar_rejects_invalid_arguments(self) -> None:
        for args in ((math.inf, 10), (None, 10), ("1", 10), (1, math.inf), (1, None), (1, "1")):
            with self.assertRaises(InvalidNumberError):
                Vector.from_polar(*args)

    def test_random_unit_vector(self) -> None:
        for _ in range(20):
            vec = Vector.random_unit_vector()
            self.assertIsInstance(vec, Vector)
            self.assertAlmostEqual(vec.magnitude(), 1)


class CopyTests(unittest.TestCase):
    def test_clone_is_independent(self) -> None:
        original = Vector(42, 21)
        cloned = original.clone()
        self.assertIsNot(cloned, original)
        self.assertTrue(cloned.is_equal_to(original))
        cloned.add_scalar(1)
        self.assertEqual((original.x, original.y), (42, 21))

    def test_copy_methods(self) -> None:
        source = Vector(5, 6)
        vec = Vector(1, 2)
        self.assertIs(vec.copy_x(source), vec)
        self.assertEqual((vec.x, vec.y), (5, 2))
        self.assertIs(vec.copy_y(source), vec)
        self.assertEqual((vec.x, vec.y), (5, 6))
        other = Vector().copy(Vector(7, 8))
        self.assertEqual((other.x, other.y), (7, 8))

    def test_zero(self) -> None:
        vec = Vector(100, 100)
        self.assertIs(vec.zero(), vec)
        self.assertTrue(vec.is_zero())


class ConversionTests(unittest.TestCase):
    def test_to_array_and_to_object(self) -> None:
        vec = Vector(100, 200)
        self.assertEqual(vec.to_array(), [100, 200])
        self.assertEqual(vec.to_object(), {"x": 100, "y": 200})

    def test_to_string(self) -> None:
        self.assertEqual(Vector(100, 200).to_string(), "x:100, y:200")
        self.assertEqual(str(Vector(0, 0)), "x:0, y:0")
        self.assertEqual(str(Vector(1.5, -2)), "x:1.5, y:-2")

    def test_to_polar(self) -> None:
        self.assertEqual(Vector(0, 0).to_polar(), {"r": 0, "theta": 0})
        self.assertEqual(Vector(10, 0).to_polar(), {"r": 10, "theta": 0})
        self.assertEqual(Vector(0, -1).to_polar(), {"r": 1, "theta": -math.pi / 2})
        self.assertEqual(Vector(0, 1).to_polar(), {"r": 1, "theta": math.pi / 2})

    def test_to_polar_in_all_quadrants(self) -> None:
        cases = (
            ((1, 1), math.pi / 4),
            ((-1, 1), 3 * math.pi / 4),
            ((1, -1), -math.pi / 4),
            ((-1, -1), -3 * math.pi / 4),
        )
        for (x, y), theta in cases:
            polar = Vector(x, y).to_polar()
            self.assertAlmostEqual(polar["r"], math.sqrt(2))
            self.assertAlmostEqual(polar["theta"], theta)

    def test_to_polar_of_negative_zero_has_zero_angle(self) -> None:
        self.assertEqual(Vector(-0.0, 0.0).to_polar()["theta"], 0)

    def test_to_polar_of_inverted_unit_vector(self) -> None:
        polar = Vector(1.0, 0.0).invert().to_polar()
        self.assertEqual(polar["r"], 1)
        self.assertEqual(polar["theta"], math.pi)

    def test_object_round_trip(self) -> None:
        for x, y in ((0, 0), (1.25, -3.5), (-1e6, 4e-3)):
            vec = Vector(x, y)
            self.assertTrue(Vector.from_object(vec.to_object()).is_equal_to(vec))

    def test_polar_round_trip(self) -> None:
        for x, y in ((3, 4), (-7.5, 2), (0.001, -9)):
            vec = Vector(x, y)
            polar = vec.to_polar()
            restored = Vector.from_polar(polar["theta"], polar["r"])
            self.assertTrue(restored.is_close_to(vec, 1e-9))


if __name__ == "__main__":
    unittest.main()
