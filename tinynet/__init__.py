"""A tiny feed-forward neural network trained by finite differences."""

__version__ = "0.1.0"
__all__ = ["matrix", "network", "train", "xor"]