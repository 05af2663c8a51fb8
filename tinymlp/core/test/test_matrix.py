import math
import unittest

import numpy as np

from tinymlp.core.exception import IndexOutOfRange, ShapeMismatch
from tinymlp.core.matrix import Matrix


class TestMatrixConstruction(unittest.TestCase):

    def test_row_major_layout(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        self.assertEqual(m.shape, (2, 3))
        self.assertEqual(m.get(0, 2), 3.0)
        self.assertEqual(m.get(1, 0), 4.0)
        self.assertEqual(list(m.values), [1, 2, 3, 4, 5, 6])

    def test_zeros(self):
        m = Matrix.zeros(3, 2)
        self.assertEqual(m.shape, (3, 2))
        self.assertTrue((m.values == 0).all())

    def test_wrong_number_of_values(self):
        with self.assertRaises(ValueError):
            Matrix(2, 2, [1, 2, 3])

    def test_non_positive_dimension(self):
        with self.assertRaises(ValueError):
            Matrix(0, 2, [])
        with self.assertRaises(TypeError):
            Matrix(2.0, 1, [1, 2])

    def test_from_array(self):
        m = Matrix.from_array([[1, 2], [3, 4]])
        self.assertEqual(m, Matrix(2, 2, [1, 2, 3, 4]))

        row = Matrix.from_array([1, 2, 3])
        self.assertEqual(row.shape, (1, 3))

    def test_values_from_generator(self):
        m = Matrix(2, 2, (float(v) for v in range(4)))
        self.assertEqual(m, Matrix(2, 2, [0, 1, 2, 3]))

    def test_values_are_copied(self):
        source = np.array([1.0, 2.0])
        m = Matrix(1, 2, source)
        source[0] = 100.0
        self.assertEqual(m.get(0, 0), 1.0)

        values = m.values
        values[1] = 100.0
        self.assertEqual(m.get(0, 1), 2.0)


class TestMatrixAccess(unittest.TestCase):

    def setUp(self):
        self.m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])

    def test_row_and_column(self):
        self.assertEqual(self.m.row(1), Matrix(1, 3, [4, 5, 6]))
        self.assertEqual(self.m.column(2), Matrix(2, 1, [3, 6]))

    def test_out_of_range(self):
        with self.assertRaises(IndexOutOfRange):
            self.m.get(2, 0)
        with self.assertRaises(IndexOutOfRange):
            self.m.get(0, -1)
        with self.assertRaises(IndexOutOfRange):
            self.m.row(5)
        with self.assertRaises(IndexOutOfRange):
            self.m.column(3)

    def test_out_of_range_is_an_index_error(self):
        with self.assertRaises(IndexError) as ctx:
            self.m.get(0, 3)
        self.assertEqual(ctx.exception.shape, (2, 3))
        self.assertEqual(ctx.exception.index, (0, 3))


class TestMatrixOperations(unittest.TestCase):

    def setUp(self):
        self.random_state = np.random.RandomState(1234)

    def random_matrix(self, rows, cols):
        return Matrix(rows, cols, self.random_state.randn(rows * cols))

    def test_transpose_literal(self):
        m = Matrix(2, 2, [1, 2, 3, 4])
        self.assertEqual(m.transpose(), Matrix(2, 2, [1, 3, 2, 4]))

    def test_transpose_shape(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        t = m.transpose()
        self.assertEqual(t.shape, (3, 2))
        self.assertEqual(t, Matrix(3, 2, [1, 4, 2, 5, 3, 6]))

    def test_transpose_involution(self):
        for shape in [(1, 1), (1, 5), (4, 1), (3, 7)]:
            m = self.random_matrix(*shape)
            self.assertEqual(m.transpose().transpose(), m)

    def test_add_then_subtract(self):
        for shape in [(1, 1), (3, 4), (5, 2)]:
            m = self.random_matrix(*shape)
            n = self.random_matrix(*shape)
            self.assertTrue(m.add(n).subtract(n).allclose(m))

    def test_multiply_elementwise_and_scale(self):
        m = Matrix(1, 3, [1, 2, 3])
        n = Matrix(1, 3, [2, 0, -1])
        self.assertEqual(m.multiply_elementwise(n), Matrix(1, 3, [2, 0, -3]))
        self.assertEqual(m.scale(-2), Matrix(1, 3, [-2, -4, -6]))

    def test_operators(self):
        m = Matrix(2, 2, [1, 2, 3, 4])
        n = Matrix(2, 2, [1, 1, 1, 1])
        self.assertEqual(m + n, m.add(n))
        self.assertEqual(m - n, m.subtract(n))
        self.assertEqual(m * n, m.multiply_elementwise(n))
        self.assertEqual(2 * m, m.scale(2))
        self.assertEqual(m * 0.5, m.scale(0.5))
        self.assertEqual(m @ n, m.matmul(n))
        self.assertEqual(-m, m.scale(-1))

    def test_operations_do_not_mutate(self):
        m = Matrix(2, 2, [1, 2, 3, 4])
        n = Matrix(2, 2, [5, 6, 7, 8])
        m.add(n)
        m.scale(3)
        m.matmul(n)
        m.sigmoid()
        self.assertEqual(m, Matrix(2, 2, [1, 2, 3, 4]))
        self.assertEqual(n, Matrix(2, 2, [5, 6, 7, 8]))

    def test_elementwise_shape_mismatch(self):
        m = Matrix(2, 2, [1, 2, 3, 4])
        n = Matrix(1, 4, [1, 2, 3, 4])

        for op in [m.add, m.subtract, m.multiply_elementwise]:
            with self.assertRaises(ShapeMismatch) as ctx:
                op(n)
            self.assertEqual(ctx.exception.expected, (2, 2))
            self.assertEqual(ctx.exception.actual, (1, 4))

    def test_matmul_literal(self):
        m = Matrix(2, 2, [1, 2, 3, 4])
        eye = Matrix(2, 2, [1, 0, 0, 1])
        self.assertEqual(m.matmul(eye), Matrix(2, 2, [1, 2, 3, 4]))

    def test_matmul_shape(self):
        a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        b = Matrix(3, 1, [1, 0, -1])
        product = a.matmul(b)
        self.assertEqual(product, Matrix(2, 1, [-2, -2]))

    def test_matmul_mismatch(self):
        a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        with self.assertRaises(ShapeMismatch) as ctx:
            a.matmul(a)
        self.assertEqual(ctx.exception.operation, 'matmul')
        self.assertEqual(ctx.exception.actual, (2, 3))
        self.assertIn('(2, 3)', str(ctx.exception))

    def test_matmul_identity(self):
        for n in [1, 2, 5]:
            m = self.random_matrix(n, n)
            self.assertTrue(m.matmul(m.identity()).allclose(m))

    def test_identity_non_square(self):
        m = Matrix.zeros(2, 3).identity()
        self.assertEqual(m, Matrix(2, 3, [1, 0, 0, 0, 1, 0]))

    def test_random_uniform(self):
        m = Matrix.zeros(20, 30).random_uniform(
            -0.5, 0.5, random_state=self.random_state)
        self.assertEqual(m.shape, (20, 30))
        self.assertTrue((m.values >= -0.5).all())
        self.assertTrue((m.values < 0.5).all())

        a = Matrix.zeros(3, 3).random_uniform(
            0, 1, random_state=np.random.RandomState(7))
        b = Matrix.zeros(3, 3).random_uniform(
            0, 1, random_state=np.random.RandomState(7))
        self.assertEqual(a, b)

    def test_normalize_columns(self):
        m = Matrix(2, 2, [3, 1, 4, 1]).normalize_columns()
        expected = Matrix(2, 2, [0.6, 1/math.sqrt(2), 0.8, 1/math.sqrt(2)])
        self.assertTrue(m.allclose(expected))

    def test_rms_cost_of_zeros(self):
        for shape in [(1, 1), (4, 1), (3, 5)]:
            self.assertEqual(Matrix.zeros(*shape).rms_cost(), 0.0)

    def test_rms_cost_single_entry(self):
        n = 12
        values = np.zeros(n)
        values[5] = -3.0
        m = Matrix(3, 4, values)
        self.assertAlmostEqual(m.rms_cost(), 3.0 / math.sqrt(n))


class TestMatrixActivations(unittest.TestCase):

    samples = [-5.0, -1.0, 0.0, 1.0, 5.0]

    def test_sigmoid_derivative_from_output(self):
        x = Matrix(1, 5, self.samples)
        derivative = x.sigmoid().sigmoid_derivative()

        for i, xi in enumerate(self.samples):
            expected = math.exp(-xi) / (1 + math.exp(-xi))**2
            self.assertAlmostEqual(derivative.get(0, i), expected)

    def test_sigmoid(self):
        s = Matrix(1, 1, [0.0]).sigmoid()
        self.assertEqual(s.get(0, 0), 0.5)

    def test_tanh_is_hyperbolic_tangent(self):
        t = Matrix(1, 5, self.samples).tanh()
        for i, xi in enumerate(self.samples):
            self.assertAlmostEqual(t.get(0, i), math.tanh(xi))

        # Not the cosine
        self.assertEqual(Matrix(1, 1, [0.0]).tanh().get(0, 0), 0.0)

    def test_tanh_derivative_from_output(self):
        derivative = Matrix(1, 5, self.samples).tanh().tanh_derivative()
        for i, xi in enumerate(self.samples):
            self.assertAlmostEqual(derivative.get(0, i),
                                   1 / math.cosh(xi)**2)

    def test_relu(self):
        x = Matrix(1, 4, [-2.0, 0.0, 0.5, 3.0])
        self.assertEqual(x.relu(), Matrix(1, 4, [0, 0, 0.5, 3]))
        self.assertEqual(x.relu_derivative(), Matrix(1, 4, [0, 0, 1, 1]))

        # Same pattern when computed from the relu output
        self.assertEqual(x.relu().relu_derivative(), x.relu_derivative())


if __name__ == '__main__':
    unittest.main()
