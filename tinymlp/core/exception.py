class ShapeMismatch(ValueError):
    """ Raised when the shapes of matrix operands are incompatible for the
    requested operation
    """
    def __init__(self, operation, expected, actual):
        self.operation = operation
        self.expected = tuple(expected)
        self.actual = tuple(actual)

        msg = "{}: expected shape {} but got {}".format(
            operation, self.expected, self.actual)
        super().__init__(msg)


class IndexOutOfRange(IndexError):
    """ Raised when accessing an element, row or column outside of a matrix
    """
    def __init__(self, index, shape):
        self.index = index
        self.shape = tuple(shape)

        msg = "Index {} is out of range for shape {}".format(
            index, self.shape)
        super().__init__(msg)


class NetworkNotInitialized(Exception):
    """ Raised when running the network before its parameters have been
    randomly initialized
    """


class ForwardPassRequired(Exception):
    """ Raised when updating the network before a forward pass has filled
    the activation cache
    """
