"""A small multilayer perceptron, its activation and loss functions, and an MNIST IDX dataset reader."""

__version__ = "0.1.0"