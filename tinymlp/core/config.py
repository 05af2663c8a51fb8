import numbers


DEFAULT_LEARNING_RATE = 0.05
DEFAULT_MAX_EPOCHS = 100000
DEFAULT_MAX_ERROR = 0.0001


class NetworkConfig(object):
    """ Training hyperparameters consumed once when a network is built
    """
    _fields = ('learning_rate', 'max_epochs', 'max_error')

    def __init__(self, learning_rate=DEFAULT_LEARNING_RATE,
                 max_epochs=DEFAULT_MAX_EPOCHS,
                 max_error=DEFAULT_MAX_ERROR):
        """
        Parameters
        ----------
        learning_rate: float, default=0.05
            The gradient descent step size.

        max_epochs: int, default=100000
            Upper bound on the number of passes over the training data.

        max_error: float, default=0.0001
            Training stops as soon as an epoch's RMS cost falls below
            this value.

        """
        try:
            learning_rate = float(learning_rate)
            max_error = float(max_error)
        except (ValueError, TypeError):
            msg = "`learning_rate` and `max_error` must be numeric"
            raise ValueError(msg)

        if not learning_rate > 0:
            msg = "`learning_rate` must be positive but was {}"
            raise ValueError(msg.format(learning_rate))

        if (isinstance(max_epochs, bool) or
                not isinstance(max_epochs, numbers.Integral)):
            msg = "`max_epochs` must be an int but was {}"
            raise ValueError(msg.format(type(max_epochs).__name__))

        if max_epochs < 1:
            msg = "`max_epochs` must be positive but was {}"
            raise ValueError(msg.format(max_epochs))

        if not max_error >= 0:
            msg = "`max_error` must be non-negative but was {}"
            raise ValueError(msg.format(max_error))

        self.learning_rate = learning_rate
        self.max_epochs = int(max_epochs)
        self.max_error = max_error

    def __repr__(self):
        return ("<NetworkConfig learning_rate=%g, max_epochs=%d, "
                "max_error=%g>" % (self.learning_rate, self.max_epochs,
                                   self.max_error))

    def __eq__(self, other):
        if not isinstance(other, NetworkConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    @classmethod
    def from_dict(cls, options):
        """ Build a config from a mapping; missing fields take defaults
        """
        unknown = set(options) - set(cls._fields)
        if unknown:
            msg = "Unknown config option(s): {}"
            raise ValueError(msg.format(', '.join(sorted(unknown))))
        return cls(**options)

    def to_dict(self):
        return {field: getattr(self, field) for field in self._fields}
