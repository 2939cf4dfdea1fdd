# mnistnet

A small feed-forward neural network (multilayer perceptron) and a reader for
the MNIST handwritten-digit dataset in its IDX file format. It is written in
plain Python and has no third-party dependencies.

## Installation

```
pip install .
```

## Command line

```
mnistnet [--images PATH] [--labels PATH]
```

By default the command reads the MNIST training set from these files, relative
to the current directory:

- `dataset/train-images.idx3-ubyte` (override with `--images`)
- `dataset/train-labels.idx1-ubyte` (override with `--labels`)

The command first prints the label of the first entry and its 28×28 pixel grid.
It then builds a network with these settings:

- 784 inputs, normalized by 255
- two hidden layers of 32 and 16 neurons
- 10 outputs
- sigmoid activations and squared-difference loss
- a batch size of 300 and a learning rate of 0.25

Next it runs the entries through the network in whole batches of 300 and drops
any trailing partial batch. For each entry it calls `backpropagate` with a
one-hot vector of the entry's label.

If a file cannot be opened, has a wrong magic number or ends early, the command
prints `failed to read dataset: ...` to standard error and exits with status 1.
It does the same when the dataset has no entries.

## Library use

### Reading the dataset

```python
from mnistnet.dataset import read_file
from mnistnet.printer import format_entry, print_entry

entries = read_file("dataset/train-images.idx3-ubyte",
                    "dataset/train-labels.idx1-ubyte")
print_entry(entries[0])
text = format_entry(entries[0])
```

`read_file` raises these errors:

- `ValueError` when the image file's magic number is not 2051 or the label
  file's magic number is not 2049
- `EOFError` when either file ends before all the entries it announces
- `OSError` when a file cannot be opened

Each `Entry` is a frozen dataclass with these parts:

- `image`: a tuple of 28 rows, each 28 bytes long
- `label`: an `int`

`Entry.pixels()` returns the image flattened row by row into one `bytes`
object. `format_entry` returns the label line and a grid in which each pixel
value is centred in four columns. `print_entry` writes that text to standard
output.

### Activation and loss functions

`mnistnet.functions` provides these enums:

- `Activation`: `RELU`, `SIGMOID`, `SILU`, `TANH`, `SOFTSIGN`, `SOFTPLUS`,
  `GAUSSIAN`
- `Loss`: `SQUARED_DIFFERENCE`

Each member has two methods. `.function()` returns a plain callable.
`.derivative()` returns its derivative. The ReLU derivative is the constant 1.
The squared-difference derivative is `2 * (x - y)`.

`total_loss(loss, result, expected)` applies a loss callable to the two
sequences pair by pair and returns the sum. It raises `ValueError` when their
lengths differ.

```python
from mnistnet.functions import Loss, total_loss

total_loss(Loss.SQUARED_DIFFERENCE.function(), [0.5, 1.0], [0.0, 1.0])  # 0.25
```

### Building and running a network

```python
from mnistnet.functions import Activation, Loss
from mnistnet.network import NeuralNetwork

net = (
    NeuralNetwork.builder()
    .with_input_size(28 * 28)
    .with_hidden_layer_of_size(32)
    .with_hidden_layer_of_size(16)
    .with_output_size(10)
    .with_activations(Activation.SIGMOID, Activation.SIGMOID)
    .with_loss(Loss.SQUARED_DIFFERENCE)
    .with_batch_size(300)
    .with_learning_rate(0.25)
    .normalize_inputs(255)
    .build()
)

outputs = net.propagate(entries[0].pixels())
errors = net.backpropagate(outputs, [1.0 if d == entries[0].label else 0.0 for d in range(10)])
```

The builder has these rules:

- Each setting may be given only once. Hidden layers are the exception: you may
  add as many as you like.
- Sizes and the batch size must be positive.
- The learning rate must not be zero.
- The normalization maximum must not be negative.
- `build()` raises `ValueError` if the input size, output size, batch size,
  learning rate, activations or loss is missing.

Every layer is a `Layer` whose weights and biases start as random values in
[-10, 10].

`propagate(inputs)` works as follows:

- It raises `ValueError` unless it is given exactly `input_size` values.
- When normalization is set, it divides each input by the maximum.
- It passes the values through the hidden layers using the neuron activation,
  then through the output layer using the output activation.
- It returns the output activations.

`backpropagate(result, expected)` returns the error term of each output neuron.
Each term is the output activation's derivative at the neuron's weighted input
multiplied by the loss derivative of `result` against `expected`. It raises
these errors:

- `RuntimeError` if `propagate` has not been called yet
- `ValueError` if either sequence is shorter than the output layer

## What this package does not do

`backpropagate` only computes the output-layer error terms. The package never
changes weights or biases, so the network does not learn. `batch_size` and
`learning_rate` are stored on the network but nothing uses them. The package
also has none of the following:

- training loop with weight updates
- accuracy evaluation on a test set
- saving or loading of trained networks

## Tests

```
pip install .[test]
pytest
```