import collections
import enum

from tinymlp.core.matrix import Matrix


class Activation(enum.Enum):
    """ The elementwise nonlinearities a network can apply after each layer
    """
    SIGMOID = 'sigmoid'
    TANH = 'tanh'
    RELU = 'relu'

    @classmethod
    def parse(cls, activation):
        """ Resolve an `Activation` member or its (case insensitive) name
        """
        if isinstance(activation, cls):
            return activation

        if isinstance(activation, str):
            try:
                return cls(activation.lower())
            except ValueError:
                pass

        msg = "Unknown activation {!r}; expected one of {}"
        raise ValueError(msg.format(
            activation, ', '.join(member.value for member in cls)))


# `forward` maps a layer's pre-activation to its output. `derivative` takes
# the cached layer output and returns the local derivative.
ActivationFunctions = collections.namedtuple(
    'ActivationFunctions', ['forward', 'derivative'])


_FUNCTIONS = {
    Activation.SIGMOID: ActivationFunctions(
        forward=Matrix.sigmoid, derivative=Matrix.sigmoid_derivative),
    Activation.TANH: ActivationFunctions(
        forward=Matrix.tanh, derivative=Matrix.tanh_derivative),
    Activation.RELU: ActivationFunctions(
        forward=Matrix.relu, derivative=Matrix.relu_derivative),
}


def get_functions(activation):
    """ Returns the `ActivationFunctions` pair for `activation`

    Parameters
    ----------
    activation: Activation or str
        An `Activation` member or one of the names
        'sigmoid', 'tanh', 'relu'.

    Returns
    -------
    functions: ActivationFunctions
        Named tuple of `forward` and `derivative` callables, each taking
        and returning a :class:`tinymlp.core.matrix.Matrix`.

    """
    return _FUNCTIONS[Activation.parse(activation)]
