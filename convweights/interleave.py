"""Reordering padded weights so that input-channel folds are contiguous."""

from __future__ import annotations

from typing import Sequence

from convweights.cheader import format_array

_SLOT = 12


def interleave_weights(
    weights: Sequence[int],
    output_channels: int,
    input_fold_factor: int,
    n_max: int = 32,
) -> list[int]:
    """Group padded weights by input fold, then by output channel.

    Each output channel owns ``input_fold_factor`` blocks of ``n_max``
    twelve-value kernels. The result lists block 0 of every channel, then
    block 1 of every channel, and so on.
    """
    if output_channels <= 0 or input_fold_factor <= 0 or n_max <= 0:
        raise ValueError("channel counts and fold factor must be positive")
    block = _SLOT * n_max
    per_channel = block * input_fold_factor
    needed = per_channel * output_channels
    if len(weights) < needed:
        raise ValueError(f"expected at least {needed} weights, got {len(weights)}")
    interleaved: list[int] = []
    for fold in range(input_fold_factor):
        for channel in range(output_channels):
            start = channel * per_channel + fold * block
            interleaved.extend(weights[start:start + block])
    return interleaved


def render_interleaved_header(
    layer_idx: int, biases: Sequence[int], weights: Sequence[int]
) -> str:
    """Render the ``group_<n>_weight_it.h`` header text."""
    return format_array(
        "short", f"group_{layer_idx}_biases", biases, "\n\n"
    ) + format_array("short", f"group_{layer_idx}_weights", weights, "")