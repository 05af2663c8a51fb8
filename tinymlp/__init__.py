# flake8: noqa

from .core.activation import Activation
from .core.config import NetworkConfig
from .core.exception import (
    ForwardPassRequired, IndexOutOfRange, NetworkNotInitialized,
    ShapeMismatch)
from .core.matrix import Matrix
from .core.network import FitResult, NeuralNetwork
