"""Small systems tools: Poisson probabilities, shortest paths, maximum subarrays, a phonebook, tic-tac-toe and a socket relay."""

__version__ = "0.1.0"