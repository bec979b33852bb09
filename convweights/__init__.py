"""Batch-norm folding, kernel padding and weight interleaving for convolution layers, read from and written to C headers."""

__version__ = "0.1.0"