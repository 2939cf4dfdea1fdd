"""Command that loads the MNIST training set and runs the network over it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .dataset import Entry, read_file
from .functions import Activation, Loss
from .network import NeuralNetwork
from .printer import print_entry

DEFAULT_IMAGES = "dataset/train-images.idx3-ubyte"
DEFAULT_LABELS = "dataset/train-labels.idx1-ubyte"
OUTPUT_SIZE = 10


def _build_network() -> NeuralNetwork:
    return (
        NeuralNetwork.builder()
        .with_input_size(28 * 28)
        .with_hidden_layer_of_size(32)
        .with_hidden_layer_of_size(16)
        .with_output_size(OUTPUT_SIZE)
        .with_activations(Activation.SIGMOID, Activation.SIGMOID)
        .with_loss(Loss.SQUARED_DIFFERENCE)
        .with_batch_size(300)
        .with_learning_rate(0.25)
        .normalize_inputs(255)
        .build()
    )


def _one_hot(label: int) -> list[float]:
    if not 0 <= label < OUTPUT_SIZE:
        raise ValueError(f"label {label} is out of range")
    return [1.0 if digit == label else 0.0 for digit in range(OUTPUT_SIZE)]


def _train(network: NeuralNetwork, entries: Sequence[Entry]) -> None:
    # Only whole batches are used; a trailing partial batch is dropped.
    usable = len(entries) - len(entries) % network.batch_size
    for entry in entries[:usable]:
        result = network.propagate(entry.pixels())
        network.backpropagate(result, _one_hot(entry.label))


def main(argv: Sequence[str] | None = None) -> int:
    """Load the training set, show its first entry and run the network over it."""
    parser = argparse.ArgumentParser(
        prog="mnistnet", description="Run a neural network over the MNIST training set."
    )
    parser.add_argument("--images", default=DEFAULT_IMAGES, help="IDX image file")
    parser.add_argument("--labels", default=DEFAULT_LABELS, help="IDX label file")
    args = parser.parse_args(argv)

    try:
        training_data = read_file(args.images, args.labels)
    except (OSError, ValueError, EOFError) as error:
        print(f"failed to read dataset: {error}", file=sys.stderr)
        return 1

    if not training_data:
        print("failed to read dataset: no entries", file=sys.stderr)
        return 1

    print_entry(training_data[0])

    network = _build_network()
    _train(network, training_data)
    return 0


if __name__ == "__main__":
    sys.exit(main())