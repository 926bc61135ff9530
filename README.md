# zerozen

A small neural network library written from first principles: a dense
`Matrix` type, activation and loss functions, fully connected layers and a
`Network` trained by full-batch or mini-batch gradient descent. Everything
runs in plain Python; Pillow is used only to write images in the upscaling
demo.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Matrices

`zerozen.matrix.Matrix` stores floats in a flat row-major list.

```python
from zerozen.matrix import Matrix

a = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
b = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
print(a.mul(b))          # matrix product
print(a.transpose().shape())
```

Constructors: `Matrix(rows, cols, data)`, `from_rows`, `zeros`, `ones`,
`fill`, `identity` and `random` (uniform in `[low, high)`). Operations
include `get`/`set`, `map`, `scale`, `add`, `sub`, `hadamard`, `mul`,
`dot` (vectors only), `transpose`, `split_column`, `add_scalar`,
`sub_scalar`, `div_scalar`, `sum_rows`, `sum_cols`, `sum_all` and
`add_bias_vector`. Shape mismatches raise `ValueError`, out-of-range
indices raise `IndexError` and dividing by zero raises
`ZeroDivisionError`.

## Building a network

Networks are assembled with a builder. Each layer is described by a
`LayerConfig` giving its neuron count and activation; `build` takes the
number of input features.

```python
from zerozen.activations import Activation, ActivationKind, leaky_relu
from zerozen.layer import LayerConfig
from zerozen.loss import LossKind
from zerozen.matrix import Matrix
from zerozen.network import Network

net = (
    Network.builder()
    .layer(LayerConfig(neurons=3, activator=leaky_relu(0.01)))
    .layer(LayerConfig(neurons=1, activator=Activation(ActivationKind.SIGMOID)))
    .loss(LossKind.MEAN_SQUARED_ERROR)
    .learning_rate(0.5)
    .epochs(20_000)
    .with_logging(True, 500)
    .build(2)
)

inputs = Matrix.from_rows([[0, 0], [1, 0], [0, 1], [1, 1]])
targets = Matrix.from_rows([[0], [1], [1], [0]])

net.train(inputs, targets)
print(net.forward(inputs))
print(net)
```

Builder defaults: learning rate 0.01, mean squared error, 10,000 epochs,
no batch size, logging on every 200 epochs.

`train` runs full-batch gradient descent for the configured number of
epochs and appends `(epoch, loss)` to `loss_history` for every epoch.
`train_sgd` shuffles the samples every epoch and trains on mini-batches;
it needs a batch size set with `.batch_size(n)` and records the
sample-weighted epoch loss only on logging epochs. With logging on, the
loss is printed every `log_level` epochs and on the last one. Printing a
network gives a summary table of its layers, loss, learning rate and
epochs.

Activations (`ActivationKind`): identity, sigmoid, ReLU, tanh, leaky ReLU
(`leaky_relu(alpha)`) and softmax. Weights are initialised to suit the
activation (Xavier uniform for sigmoid and tanh, He normal for the ReLU
family). Losses (`LossKind`) are mean squared error and cross-entropy;
a softmax layer passes the incoming gradient through unchanged, so it is
meant to be paired with cross-entropy.

## Helpers

`zerozen.utils` offers `random_float`, `load_csv` (skips a header line;
unparsable values become `0.0`), `one_hot_to_labels` (index of the
largest value in each row) and `accuracy` (a percentage).
`zerozen.loss.labels_to_one_hot` turns a column of class indices into a
one-hot matrix.

## Commands

Two demonstration programs are installed.

```
zerozen-xor
```

trains a tiny network on the XOR truth table and prints its inputs,
targets, predictions and a summary of the network.

```
zerozen-upscale [--output-dir DIR]
```

trains a coordinate-to-brightness network on a 28x28 handwritten digit,
writes the original as `og_image.png`, then renders the learned function
at 256x256 and writes `upscaled_image.png`. Both files go to `DIR`
(default: the current directory). Training runs for 150,000 epochs and
takes a long time.

## What it does not do

There is no way to save or load a trained network: weights live only in
memory for the life of the process. There is no GPU support, no
optimiser other than plain gradient descent, and no layer types other
than dense layers.