import logging
import unittest
from unittest import mock

from curvetools import Curve, Point, INF, double, negate, scalar_multiply


class TestScalarMultiplication(unittest.TestCase):

    def setUp(self):
        self.curve = Curve(-7, 10)
        self.P = Point(1, 2)

    def test_small_multiples(self):
        self.assertTrue(scalar_multiply(0, self.P, self.curve).is_inf())
        self.assertTrue(scalar_multiply(1, self.P, self.curve).equals(self.P))
        self.assertTrue(scalar_multiply(2, self.P, self.curve).equals(double(self.P, self.curve).result))
        self.assertEqual(scalar_multiply(3, self.P, self.curve), Point(9, -26))
        self.assertEqual(scalar_multiply(4, self.P, self.curve), Point(2.25, 2.375))

    def test_results_stay_on_curve(self):
        for k in range(1, 6):
            result = scalar_multiply(k, self.P, self.curve)
            self.assertTrue(result in self.curve, f'{k}P = {result}')

    def test_negative_scalar(self):
        for k in (1, 2, 3, 5):
            self.assertTrue(scalar_multiply(-k, self.P, self.curve).equals(scalar_multiply(k, negate(self.P), self.curve)))
        self.assertEqual(scalar_multiply(-3, self.P, self.curve), Point(9, 26))

    def test_infinity(self):
        for k in (-2, 0, 1, 7):
            self.assertIs(scalar_multiply(k, INF, self.curve), INF)

    def test_truncates_scalar(self):
        self.assertEqual(scalar_multiply(2.7, self.P, self.curve), Point(-1, -4))
        self.assertEqual(scalar_multiply(-2.7, self.P, self.curve), Point(-1, 4))
        self.assertIs(scalar_multiply(0.5, self.P, self.curve), INF)

    def test_non_finite_scalar_is_not_handled(self):
        with self.assertRaises(OverflowError):
            scalar_multiply(float('inf'), self.P, self.curve)
        with self.assertRaises(ValueError):
            scalar_multiply(float('nan'), self.P, self.curve)

    def test_order_two_point(self):
        curve = Curve(-1, 0)
        P = Point(0, 0)
        self.assertIs(scalar_multiply(2, P, curve), INF)
        self.assertEqual(scalar_multiply(3, P, curve), P)
        self.assertIs(scalar_multiply(4, P, curve), INF)

    def test_logs_each_bit(self):
        with self.assertLogs('curvetools.EC.operations', level='DEBUG') as cm:
            scalar_multiply(5, self.P, self.curve)
        self.assertEqual(len(cm.output), 3)
        self.assertIn('bit 0', cm.output[0])

    def test_debug_messages_are_formatted_lazily(self):
        logger = logging.getLogger('curvetools.EC.operations')
        previous = logger.level
        logger.setLevel(logging.INFO)
        try:
            with mock.patch.object(Point, '__str__', side_effect=AssertionError('formatted')):
                scalar_multiply(5, self.P, self.curve)
        finally:
            logger.setLevel(previous)
