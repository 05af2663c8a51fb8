import unittest

from tinymlp.core.activation import Activation, get_functions
from tinymlp.core.matrix import Matrix


class TestActivation(unittest.TestCase):

    def test_parse(self):
        self.assertIs(Activation.parse('tanh'), Activation.TANH)
        self.assertIs(Activation.parse('Sigmoid'), Activation.SIGMOID)
        self.assertIs(Activation.parse('ReLU'), Activation.RELU)
        self.assertIs(Activation.parse(Activation.RELU), Activation.RELU)

    def test_parse_unknown(self):
        with self.assertRaises(ValueError):
            Activation.parse('cos')
        with self.assertRaises(ValueError):
            Activation.parse(3)

    def test_functions(self):
        x = Matrix(1, 3, [-1.0, 0.0, 2.0])

        for activation, forward, derivative in [
                (Activation.SIGMOID, x.sigmoid, x.sigmoid_derivative),
                (Activation.TANH, x.tanh, x.tanh_derivative),
                (Activation.RELU, x.relu, x.relu_derivative)]:
            functions = get_functions(activation)
            self.assertEqual(functions.forward(x), forward())
            self.assertEqual(functions.derivative(x), derivative())

    def test_functions_by_name(self):
        self.assertIs(get_functions('tanh'), get_functions(Activation.TANH))


if __name__ == '__main__':
    unittest.main()
