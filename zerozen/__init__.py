"""Dense neural networks with backpropagation on a small pure-Python matrix type."""

__version__ = "1.0.0"
__all__ = ["activations", "layer", "loss", "matrix", "network", "upscale", "utils", "xor"]