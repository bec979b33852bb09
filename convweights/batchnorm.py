"""Folding batch-normalisation parameters into convolution weights."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Sequence

from convweights.cheader import HeaderParseError, format_array, parse_arrays


def _f32(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


_EPSILON = _f32(0.00001)


@dataclass(frozen=True)
class FoldedLayer:
    """Biases and weights of a layer with batch normalisation folded in."""

    biases: list[float]
    weights: list[float]

    @property
    def output_channels(self) -> int:
        return len(self.biases)

    @property
    def kernel_size(self) -> int:
        return len(self.weights) // len(self.biases)


def fold_batch_norm(
    biases: Sequence[float],
    scales: Sequence[float],
    rolling_mean: Sequence[float],
    rolling_variance: Sequence[float],
    weights: Sequence[float],
) -> FoldedLayer:
    """Fold scale, mean and variance into the biases and weights.

    The number of output channels is the length of ``rolling_mean``; each
    channel owns ``len(weights) // channels`` consecutive weights.
    """
    channels = len(rolling_mean)
    if channels == 0:
        raise ValueError("rolling_mean is empty")
    for label, values in (
        ("biases", biases),
        ("scales", scales),
        ("rolling_variance", rolling_variance),
    ):
        if len(values) < channels:
            raise ValueError(
                f"{label} has {len(values)} values, expected {channels}"
            )
    kernel_size = len(weights) // channels
    if kernel_size == 0:
        raise ValueError(
            f"{len(weights)} weights are too few for {channels} channels"
        )

    folded_biases: list[float] = []
    folded_weights: list[float] = []
    for channel, (bias, scale, mean, var) in enumerate(
        zip(biases, scales, rolling_mean, rolling_variance)
    ):
        scale, mean, var = _f32(scale), _f32(mean), _f32(var)
        denominator = math.sqrt(var) + _EPSILON if var >= 0 else math.nan
        folded_biases.append(_f32(_f32(bias) - mean / denominator * scale))
        start = channel * kernel_size
        folded_weights.extend(
            _f32(_f32(weight) / denominator * scale)
            for weight in weights[start:start + kernel_size]
        )
    return FoldedLayer(folded_biases, folded_weights)


def render_folded_header(layer_idx: int, folded: FoldedLayer) -> str:
    """Render the ``conv_<n>_weight_bn.h`` header text for a folded layer."""
    return (
        f"#ifndef CONV_{layer_idx}_WEIGHT_BN_H\n"
        f"#define CONV_{layer_idx}_WEIGHT_BN_H\n"
        "\n"
        + format_array("float", f"conv_{layer_idx}_biases_bn", folded.biases, "\n")
        + "\n"
        + format_array("float", f"conv_{layer_idx}_weights_bn", folded.weights, "\n")
        + "\n"
        + "#endif"
    )


def fold_header(text: str, source_idx: int, layer_idx: int) -> str:
    """Fold the ``conv_<source_idx>_*`` arrays of a header into a new header.

    The result names its arrays and guard after ``layer_idx``.
    """
    arrays = parse_arrays(text)
    parts = {}
    for part in ("biases", "scales", "rolling_mean", "rolling_variance", "weights"):
        name = f"conv_{source_idx}_{part}"
        try:
            parts[part] = arrays[name]
        except KeyError:
            raise HeaderParseError(f"header has no array {name!r}") from None
    folded = fold_batch_norm(**parts)
    return render_folded_header(layer_idx, folded)