"""
A dense feed-forward neural network trained by online gradient descent.

For an architecture `arch = [a0, a1, ..., aL]`, layer `i` maps a column
vector of length `arch[i]` to one of length `arch[i+1]`:

    activations[i+1] = f( dot(weights[i], activations[i]) + biases[i] )

where `f` is the network's (single) activation function. Training runs
one forward pass and one parameter update per example, in dataset order,
minimizing the squared error between the output and the target.
"""
import collections
import logging

import numpy

from tinymlp.core.activation import Activation, get_functions
from tinymlp.core.config import NetworkConfig
from tinymlp.core.exception import (
    ForwardPassRequired, NetworkNotInitialized, ShapeMismatch)
from tinymlp.core.matrix import Matrix


logger = logging.getLogger(__name__)

# The biases are drawn from the weight interval shrunk by this amount on
# both ends.
BIAS_RANGE_SHRINK = 0.3

DEFAULT_LOG_EVERY = 1000


FitResult = collections.namedtuple(
    'FitResult', ['cost', 'epochs', 'converged', 'cost_history'])


class NeuralNetwork(object):
    """
    Fully connected network with a fixed topology and a single activation
    function shared by every layer.

    attributes: weights, where weights[i] has shape (arch[i+1], arch[i]).
                biases, where biases[i] has shape (arch[i+1], 1).
                activations, the forward pass cache, where activations[0]
                is the last input and activations[i+1] the output of
                layer i.

    Note
    ----
    `forward`, `backward` and `fit` overwrite the activation cache and
    the parameters in place. A network must not be used from more than
    one thread at a time.
    """
    def __init__(self, activation, arch, config=None):
        """
        Parameters
        ----------
        activation: Activation or str
            One of `Activation.SIGMOID`, `Activation.TANH`,
            `Activation.RELU` (or their names).

        arch: sequence of int
            The layer widths `[a0, ..., aL]`, input layer first. At least
            two positive entries are required.

        config: NetworkConfig, default=None
            The training hyperparameters. The default (None) uses
            `NetworkConfig()`.
        """
        arch = self._validate_arch(arch)

        if config is None:
            config = NetworkConfig()
        elif not isinstance(config, NetworkConfig):
            msg = "`config` should be a NetworkConfig but was {}"
            raise TypeError(msg.format(type(config).__name__))

        self._activation = Activation.parse(activation)
        # Resolved once; the layer loops only call through this pair.
        self._functions = get_functions(self._activation)

        self._arch = [int(width) for width in arch]
        self._config = config

        depth = len(self._arch) - 1
        self._weights = [Matrix.zeros(1, 1) for _ in range(depth)]
        self._biases = [Matrix.zeros(1, 1) for _ in range(depth)]
        self._activations = [Matrix.zeros(1, 1) for _ in range(depth + 1)]

        self._is_initialized = False
        self._has_forward_pass = False

    @staticmethod
    def _validate_arch(arch):
        if not numpy.iterable(arch) or isinstance(arch, str):
            raise TypeError("`arch` must be a sequence of ints")

        arch = list(arch)

        if len(arch) < 2:
            msg = "`arch` needs at least 2 layer widths but got {}"
            raise ValueError(msg.format(len(arch)))

        for width in arch:
            if (isinstance(width, bool) or
                    not isinstance(width, (int, numpy.integer)) or
                    width < 1):
                msg = "Layer widths must be positive ints but got {!r}"
                raise ValueError(msg.format(width))

        return arch

    def __repr__(self):
        return "<NeuralNetwork arch=%s, activation=%s>" % (
            self._arch, self._activation.value)

    @property
    def arch(self):
        return list(self._arch)

    @property
    def depth(self):
        """ The number of trainable layers
        """
        return len(self._arch) - 1

    @property
    def activation(self):
        return self._activation

    @property
    def config(self):
        return self._config

    @property
    def learning_rate(self):
        return self._config.learning_rate

    @property
    def max_epochs(self):
        return self._config.max_epochs

    @property
    def max_error(self):
        return self._config.max_error

    @property
    def weights(self):
        return list(self._weights)

    @property
    def biases(self):
        return list(self._biases)

    @property
    def activations(self):
        return list(self._activations)

    @property
    def is_initialized(self):
        return self._is_initialized

    def _check_initialized(self, operation):
        if not self._is_initialized:
            msg = ("Call `initialize` before `{}`; the parameters are "
                   "still placeholders")
            raise NetworkNotInitialized(msg.format(operation))

    def initialize(self, low, high, random_state=None):
        """
        Randomize the parameters. Weights are drawn uniformly from
        `[low, high)` and biases from `[low+0.3, high-0.3)`.

        Parameters
        ----------
        low, high: float
            The weight interval.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.

        Returns
        -------
        self: NeuralNetwork
        """
        random_state = (random_state if random_state is not None
                        else numpy.random.RandomState())

        for i in range(self.depth):
            n_in, n_out = self._arch[i], self._arch[i+1]

            self._weights[i] = Matrix.zeros(n_out, n_in).random_uniform(
                low, high, random_state=random_state)
            self._biases[i] = Matrix.zeros(n_out, 1).random_uniform(
                low + BIAS_RANGE_SHRINK, high - BIAS_RANGE_SHRINK,
                random_state=random_state)

        self._is_initialized = True

        logger.debug("Initialized %d layers with weights in [%g, %g)",
                     self.depth, low, high)

        return self

    def forward(self, input):
        """
        Propagate a column input through every layer, caching each layer's
        output.

        Parameters
        ----------
        input: Matrix, shape=(arch[0], 1)

        Returns
        -------
        output: Matrix, shape=(arch[-1], 1)
        """
        self._check_initialized('forward')

        if input.shape != (self._arch[0], 1):
            raise ShapeMismatch('forward', (self._arch[0], 1), input.shape)

        self._activations[0] = input

        for i in range(self.depth):
            self._activations[i+1] = self._functions.forward(
                self._weights[i].matmul(self._activations[i])
                                .add(self._biases[i]))

        self._has_forward_pass = True

        return self._activations[-1]

    def predict(self, input_row):
        """
        Parameters
        ----------
        input_row: Matrix or array-like, shape=(1, arch[0])
            A single example oriented as a row.

        Returns
        -------
        output: Matrix, shape=(1, arch[-1])
        """
        if not isinstance(input_row, Matrix):
            input_row = Matrix.from_array(input_row)
        return self.forward(input_row.transpose()).transpose()

    def backward(self, output_delta):
        """
        Apply one gradient descent update to every layer, last layer first,
        using the activations cached by the preceding `forward` call.

        Parameters
        ----------
        output_delta: Matrix, shape=(arch[-1], 1)
            The gradient of the loss with respect to the network output.

        Note
        ----
        The parameters are replaced only once every layer's update has been
        computed, so a raised exception leaves the network unchanged.
        """
        self._check_initialized('backward')

        if not self._has_forward_pass:
            raise ForwardPassRequired(
                "Call `forward` before `backward`; the activation cache "
                "is empty")

        for i, activation in enumerate(self._activations):
            if activation.shape != (self._arch[i], 1):
                raise ShapeMismatch('backward activation cache',
                                    (self._arch[i], 1), activation.shape)

        if output_delta.shape != (self._arch[-1], 1):
            raise ShapeMismatch('backward', (self._arch[-1], 1),
                                output_delta.shape)

        step = -self._config.learning_rate
        delta = output_delta

        weights = list(self._weights)
        biases = list(self._biases)

        for i in reversed(range(self.depth)):
            if i != self.depth - 1:
                # weights[i+1] has already received this call's update.
                derivative = self._functions.derivative(
                    self._activations[i+1])
                delta = (weights[i+1].transpose()
                                     .matmul(delta)
                                     .multiply_elementwise(derivative))

            weight_gradient = delta.matmul(self._activations[i].transpose())

            weights[i] = weights[i].add(weight_gradient.scale(step))
            biases[i] = biases[i].add(delta.scale(step))

        self._weights = weights
        self._biases = biases

    def fit(self, inputs, targets, log_every=DEFAULT_LOG_EVERY):
        """
        Run stochastic gradient descent (one example per update) until an
        epoch's RMS error falls below `max_error` or `max_epochs` epochs
        have run. Repeated calls resume from the current parameters.

        Parameters
        ----------
        inputs: Matrix, shape=(n_examples, arch[0])
            Training inputs -- examples by row.

        targets: Matrix, shape=(n_examples, arch[-1])
            Training targets -- examples by row.

        log_every: int, default=1000
            The epoch cost is logged (at DEBUG level) every `log_every`
            epochs.

        Returns
        -------
        result: FitResult
            Named tuple of the final epoch's cost, the number of epochs
            run, whether the cost fell below `max_error`, and the list of
            per-epoch costs.

        Note
        ----
        The final cost and epoch count are logged at INFO level on the
        `tinymlp` logger. Python shows only warnings by default, so call
        :func:`tinymlp.core.logger.setup_logging` to see them on the
        console.
        """
        self._check_initialized('fit')

        if inputs.cols != self._arch[0]:
            raise ShapeMismatch('fit inputs', (inputs.rows, self._arch[0]),
                                inputs.shape)
        if targets.shape != (inputs.rows, self._arch[-1]):
            raise ShapeMismatch('fit targets',
                                (inputs.rows, self._arch[-1]),
                                targets.shape)

        x = inputs.transpose()
        y = targets.transpose()

        cost = 0.0
        epochs = 0
        converged = False
        cost_history = []

        q = len(str(self._config.max_epochs))
        pstr = "Epoch: %%0%dd / %d, cost: %%.7f" % (q, self._config.max_epochs)

        for epoch in range(self._config.max_epochs):
            errors = []

            for j in range(x.cols):
                delta = self.forward(x.column(j)).subtract(y.column(j))
                errors.extend(delta.values)
                self.backward(delta.scale(2.0))

            cost = Matrix(targets.rows, targets.cols, errors).rms_cost()
            cost_history.append(cost)
            epochs = epoch + 1

            if log_every and epochs % log_every == 0:
                logger.debug(pstr, epochs, cost)

            if cost < self._config.max_error:
                converged = True
                break

        logger.info("error: %s", cost)
        logger.info("count: %d", epochs)

        if not converged:
            logger.warning("Stopped after %d epochs without reaching "
                           "max_error=%g", epochs, self._config.max_error)

        return FitResult(cost=cost, epochs=epochs, converged=converged,
                         cost_history=cost_history)
