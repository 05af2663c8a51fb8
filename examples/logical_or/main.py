import matplotlib.pyplot as plt
import numpy as np

from tinymlp import Activation, NetworkConfig, NeuralNetwork
from tinymlp.core.logger import setup_logging
from tinymlp.data import logical
from tinymlp.util.formatting import print_matrix, print_network
from tinymlp.visualize import plot_cost_history


random_state = np.random.RandomState(1234)

setup_logging(filename='fit-log.txt')


# Create the toy dataset ######################################################

inputs, targets = logical.make_dataset('or')

# Set up the network and fit it ###############################################

network = NeuralNetwork(
    activation=Activation.TANH,
    arch=[2, 4, 2, 1],
    config=NetworkConfig(),
)

network.initialize(-0.5, 0.5, random_state=random_state)

result = network.fit(inputs, targets)
print_network(network)

# Predict each training example ###############################################

for i in range(inputs.rows):
    print_matrix(inputs.row(i))
    print_matrix(network.predict(inputs.row(i)))

plot_cost_history(result.cost_history, max_error=network.max_error)
plt.show()
