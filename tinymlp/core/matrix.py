import collections.abc
import numbers

import numpy

from tinymlp.core.exception import IndexOutOfRange, ShapeMismatch


class Matrix(object):
    """ A dense, row-major matrix of double precision values

    Element `(r, c)` is stored at offset `r*cols + c` of a flat array of
    length `rows*cols`. Matrices behave as values: every operation returns
    a new matrix and never modifies its receiver or operands.
    """
    def __init__(self, rows, cols, values):
        """ Initialize a matrix from its shape and row-major values

        Parameters
        ----------
        rows: int
            The number of rows (positive).

        cols: int
            The number of columns (positive).

        values: iterable of float, len=rows*cols
            The elements in row-major order. The values are copied.

        """
        self._validate_dimension(rows, 'rows')
        self._validate_dimension(cols, 'cols')

        if not isinstance(values, (numpy.ndarray, collections.abc.Sequence)):
            values = list(values)

        values = numpy.array(values, dtype=float).ravel()

        if values.size != rows * cols:
            msg = "Got {} values but a ({}, {}) matrix needs {}"
            raise ValueError(msg.format(values.size, rows, cols, rows*cols))

        self._rows = int(rows)
        self._cols = int(cols)
        self._values = values
        self._values.flags.writeable = False

    @staticmethod
    def _validate_dimension(dim, name):
        if isinstance(dim, bool) or not isinstance(dim, numbers.Integral):
            msg = "`{}` must be an int but was {}"
            raise TypeError(msg.format(name, type(dim).__name__))
        if dim < 1:
            msg = "`{}` must be positive but was {}"
            raise ValueError(msg.format(name, dim))

    @classmethod
    def zeros(cls, rows, cols):
        """ All-zero matrix of shape `(rows, cols)`
        """
        cls._validate_dimension(rows, 'rows')
        cls._validate_dimension(cols, 'cols')
        return cls(rows, cols, numpy.zeros(rows * cols))

    @classmethod
    def from_array(cls, arr):
        """ Create a matrix from an array-like. One dimensional input is
        treated as a single row.
        """
        arr = numpy.asarray(arr, dtype=float)

        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        elif arr.ndim != 2:
            msg = "Expected a 1d or 2d array but got {} dimensions"
            raise ValueError(msg.format(arr.ndim))

        return cls(arr.shape[0], arr.shape[1], arr)

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    @property
    def shape(self):
        return (self._rows, self._cols)

    @property
    def size(self):
        return self._rows * self._cols

    @property
    def values(self):
        """ A copy of the flat, row-major element array
        """
        return self._values.copy()

    def to_array(self):
        """ Returns a copy of the elements as a `(rows, cols)` ndarray
        """
        return self._values.reshape(self.shape).copy()

    def _as_2d(self):
        # Read-only view; callers must not write to it
        return self._values.reshape(self.shape)

    def _new(self, arr):
        arr = numpy.asarray(arr, dtype=float)
        return Matrix(arr.shape[0], arr.shape[1], arr)

    def _check_same_shape(self, other, operation):
        if not isinstance(other, Matrix):
            msg = "{}: expected a Matrix operand but got {}"
            raise TypeError(msg.format(operation, type(other).__name__))
        if self.shape != other.shape:
            raise ShapeMismatch(operation, self.shape, other.shape)

    def __repr__(self):
        return "<Matrix rows=%d, cols=%d>" % (self._rows, self._cols)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.shape == other.shape and
                numpy.array_equal(self._values, other._values))

    __hash__ = None

    def allclose(self, other, rtol=1e-05, atol=1e-08):
        """ Elementwise equality within a tolerance (see `numpy.allclose`)
        """
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return bool(numpy.allclose(self._values, other._values,
                                   rtol=rtol, atol=atol))

    # Element access ########################################################

    def get(self, row, col):
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexOutOfRange((row, col), self.shape)
        return float(self._values[row * self._cols + col])

    def row(self, i):
        """ The `i`th row as a `(1, cols)` matrix
        """
        if not 0 <= i < self._rows:
            raise IndexOutOfRange(i, self.shape)
        return self._new(self._as_2d()[i:i+1, :])

    def column(self, j):
        """ The `j`th column as a `(rows, 1)` matrix
        """
        if not 0 <= j < self._cols:
            raise IndexOutOfRange(j, self.shape)
        return self._new(self._as_2d()[:, j:j+1])

    # Structural operations #################################################

    def identity(self):
        """ Ones wherever the row index equals the column index, zeros
        elsewhere, with the same shape as this matrix
        """
        return self._new(numpy.eye(self._rows, self._cols))

    def random_uniform(self, low, high, random_state=None):
        """ Matrix of this shape with elements drawn independently and
        uniformly from `[low, high)`

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        random_state = (random_state if random_state is not None
                        else numpy.random.RandomState())
        return Matrix(self._rows, self._cols,
                      random_state.uniform(low, high, size=self.size))

    def transpose(self):
        return self._new(self._as_2d().T)

    @property
    def T(self):
        return self.transpose()

    def normalize_columns(self):
        """ Scale every column by the reciprocal of its Euclidean norm

        Note
        ----
        A column of zeros has zero norm and produces non-finite values.
        """
        arr = self._as_2d()
        return self._new(arr / numpy.sqrt((arr**2).sum(axis=0)))

    # Arithmetic ############################################################

    def add(self, other):
        self._check_same_shape(other, 'add')
        return Matrix(self._rows, self._cols, self._values + other._values)

    def subtract(self, other):
        self._check_same_shape(other, 'subtract')
        return Matrix(self._rows, self._cols, self._values - other._values)

    def multiply_elementwise(self, other):
        self._check_same_shape(other, 'multiply_elementwise')
        return Matrix(self._rows, self._cols, self._values * other._values)

    def scale(self, k):
        return Matrix(self._rows, self._cols, self._values * float(k))

    def matmul(self, other):
        """ The matrix product `self @ other`, of shape
        `(self.rows, other.cols)`
        """
        if not isinstance(other, Matrix):
            msg = "matmul: expected a Matrix operand but got {}"
            raise TypeError(msg.format(type(other).__name__))

        if self._cols != other._rows:
            # The inner dimension is what must agree
            raise ShapeMismatch('matmul', (self._cols, other._cols),
                                other.shape)

        return self._new(numpy.dot(self._as_2d(), other._as_2d()))

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply_elementwise(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __neg__(self):
        return self.scale(-1.0)

    def __matmul__(self, other):
        return self.matmul(other)

    # Activations ###########################################################

    def sigmoid(self):
        return Matrix(self._rows, self._cols,
                      1.0 / (1.0 + numpy.exp(-self._values)))

    def sigmoid_derivative(self):
        """ The sigmoid derivative `s*(1-s)`, where this matrix already holds
        the sigmoid outputs `s`
        """
        s = self._values
        return Matrix(self._rows, self._cols, s * (1.0 - s))

    def tanh(self):
        return Matrix(self._rows, self._cols, numpy.tanh(self._values))

    def tanh_derivative(self):
        """ The tanh derivative `1 - t^2`, where this matrix already holds
        the tanh outputs `t`
        """
        t = self._values
        return Matrix(self._rows, self._cols, 1.0 - t**2)

    def relu(self):
        return Matrix(self._rows, self._cols,
                      numpy.maximum(0.0, self._values))

    def relu_derivative(self):
        """ One where the element is positive, zero elsewhere
        """
        return Matrix(self._rows, self._cols,
                      (self._values > 0).astype(float))

    # Reductions ############################################################

    def rms_cost(self):
        """ Root-mean-square magnitude of all elements,
        `sqrt(sum(x**2) / (rows*cols))`
        """
        return float(numpy.sqrt((self._values**2).sum() / self.size))
