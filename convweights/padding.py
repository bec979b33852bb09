"""Padding each convolution kernel to twelve values for the accelerator."""

from __future__ import annotations

from itertools import islice
from typing import Sequence

from convweights.cheader import format_array

_SLOT = 12
_KERNEL_3X3 = 9


def _check_length(weights: Sequence[int], needed: int) -> None:
    if len(weights) < needed:
        raise ValueError(f"expected at least {needed} weights, got {len(weights)}")


def pad_kernel_3x3(
    weights: Sequence[int], input_channels: int, output_channels: int
) -> list[int]:
    """Follow every 3x3 kernel with three zeros."""
    kernels = input_channels * output_channels
    _check_length(weights, kernels * _KERNEL_3X3)
    source = iter(weights)
    padded: list[int] = []
    for _ in range(kernels):
        padded.extend(islice(source, _KERNEL_3X3))
        padded.extend([0] * (_SLOT - _KERNEL_3X3))
    return padded


def pad_kernel_1x1(
    weights: Sequence[int], input_channels: int, output_channels: int
) -> list[int]:
    """Place every 1x1 weight at the centre of a zero 3x3 kernel, then three zeros."""
    kernels = input_channels * output_channels
    _check_length(weights, kernels)
    padded: list[int] = []
    for weight in islice(weights, kernels):
        padded.extend([0] * 4)
        padded.append(weight)
        padded.extend([0] * (_SLOT - 5))
    return padded


def render_padded_header(
    layer_idx: int,
    biases: Sequence[int],
    weights: Sequence[int],
    suffix: str = "\n\n",
) -> str:
    """Render the ``group_<n>_biases`` and ``group_<n>_weights`` arrays.

    ``suffix`` follows the weights array.
    """
    return format_array(
        "short", f"group_{layer_idx}_biases", biases, "\n\n"
    ) + format_array("short", f"group_{layer_idx}_weights", weights, suffix)