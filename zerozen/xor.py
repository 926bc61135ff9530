"""Train a small network on the XOR truth table."""

from __future__ import annotations

from collections.abc import Sequence

from zerozen.activations import Activation, ActivationKind, leaky_relu
from zerozen.layer import LayerConfig
from zerozen.loss import LossKind
from zerozen.matrix import Matrix
from zerozen.network import Network


def build_network() -> Network:
    """Two inputs, three leaky-ReLU hidden units, one sigmoid output."""
    return (
        Network.builder()
        .layer(LayerConfig(3, leaky_relu(0.01)))
        .layer(LayerConfig(1, Activation(ActivationKind.SIGMOID)))
        .loss(LossKind.MEAN_SQUARED_ERROR)
        .learning_rate(0.5)
        .epochs(20 * 1000)
        .with_logging(True, 500)
        .build(2)
    )


def xor_dataset() -> tuple[Matrix, Matrix]:
    """The four XOR inputs and their targets."""
    inputs = Matrix.from_rows([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    targets = Matrix.from_rows([[0.0], [1.0], [1.0], [0.0]])
    return inputs, targets


def main(argv: Sequence[str] | None = None) -> int:
    net = build_network()
    inputs, targets = xor_dataset()

    print("Training Started")
    net.train(inputs, targets)
    print("Training Completed")
    predictions = net.forward(inputs)
    print(f"Inputs\n{inputs}\nTargets\n{targets}\nPredictions\n{predictions}")
    print(net)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())