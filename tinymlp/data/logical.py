import logging

from tinymlp.core.matrix import Matrix


logger = logging.getLogger(__name__)

# The four boolean input pairs, in the order they are presented to a
# network during training.
INPUTS = [
    (1., 0.),
    (0., 1.),
    (1., 1.),
    (0., 0.),
]

GATES = {
    'or': lambda a, b: float(bool(a) or bool(b)),
    'and': lambda a, b: float(bool(a) and bool(b)),
    'xor': lambda a, b: float(bool(a) != bool(b)),
    'nand': lambda a, b: float(not (bool(a) and bool(b))),
}


def make_dataset(name='or'):
    """
    Make the truth table of a two-input logic gate.

    Parameters
    ----------
    name: str, default='or'
        One of 'or', 'and', 'xor', 'nand'.

    Returns
    -------
    inputs, targets: Matrix (shape=(4, 2)), Matrix (shape=(4, 1))
        Examples by row.
    """
    try:
        gate = GATES[name.lower()]
    except (KeyError, AttributeError):
        msg = "Unknown gate {!r}; expected one of {}"
        raise ValueError(msg.format(name, ', '.join(sorted(GATES))))

    inputs = Matrix(len(INPUTS), 2, [v for pair in INPUTS for v in pair])
    targets = Matrix(len(INPUTS), 1, [gate(a, b) for a, b in INPUTS])

    logger.debug("Created %r dataset with %d examples", name, len(INPUTS))

    return inputs, targets
