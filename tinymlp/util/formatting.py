INDENT = '    '


def format_matrix(matrix):
    """ Nested bracketed rendering of a matrix, one bracketed block per row

    Example, for `Matrix(1, 2, [1, 2])`::

        [
            [
                1.0    2.0
            ]
        ]
    """
    lines = ['[']
    for i in range(matrix.rows):
        values = INDENT.join(repr(matrix.get(i, j))
                             for j in range(matrix.cols))
        lines.append(INDENT + '[')
        lines.append(INDENT * 2 + values)
        lines.append(INDENT + ']')
    lines.append(']')
    return '\n'.join(lines)


def _format_matrix_list(name, matrices):
    lines = ['{}: ['.format(name)]
    for i, matrix in enumerate(matrices):
        lines.append('{}{} shape={}'.format(INDENT, i, matrix.shape))
        for line in format_matrix(matrix).split('\n'):
            lines.append(INDENT * 2 + line)
    lines.append(']')
    return lines


def format_network(network):
    """ Verbose dump of a network's hyperparameters, topology, parameters
    and activation cache
    """
    lines = [
        'NeuralNetwork {',
        '{}learning_rate: {}'.format(INDENT, network.learning_rate),
        '{}max_epochs: {}'.format(INDENT, network.max_epochs),
        '{}max_error: {}'.format(INDENT, network.max_error),
        '{}activation: {}'.format(INDENT, network.activation.name),
        '{}arch: {}'.format(INDENT, network.arch),
    ]
    for name in ('weights', 'biases', 'activations'):
        lines.extend(INDENT + line for line in
                     _format_matrix_list(name, getattr(network, name)))
    lines.append('}')
    return '\n'.join(lines)


def print_matrix(matrix):
    print(format_matrix(matrix))


def print_network(network):
    print(format_network(network))
