# convweights

Reads the C array headers that hold a convolutional layer's parameters,
folds batch normalisation into the convolution, and writes the weight
layouts a hardware accelerator expects back out as C headers.

## Install

```
pip install .
```

## Modules

### `convweights.cheader`

- `parse_arrays(text)` returns every initialised array in a header
  (`type name[...] = {...};`) as a dict from name to list of values, in
  declaration order. `float` and `double` arrays give floats, every other
  element type gives ints. Comments are ignored.
- `read_arrays(path)` does the same for a file.
- `format_array(ctype, name, values, suffix="\n")` renders
  `ctype name[]={...};` with one element per line, followed by `suffix`.
  Float types are written with six decimals, others as integers.
- `HeaderParseError` (a `ValueError`) is raised for a value that is not a
  number, an empty array, an empty element, an array declared twice, or,
  in `fold_header`, a missing array.

### `convweights.batchnorm`

- `fold_batch_norm(biases, scales, rolling_mean, rolling_variance, weights)`
  returns a `FoldedLayer` with `biases` and `weights` lists, computed in
  single precision as
  `bias - mean / (sqrt(var) + 1e-5) * scale` and
  `weight / (sqrt(var) + 1e-5) * scale`. The channel count is the length
  of `rolling_mean`; each channel owns `len(weights) // channels`
  consecutive weights. `FoldedLayer.output_channels` and
  `FoldedLayer.kernel_size` report the shape.
- `render_folded_header(layer_idx, folded)` writes the
  `conv_<n>_weight_bn.h` text with an include guard and the arrays
  `conv_<n>_biases_bn` and `conv_<n>_weights_bn`.
- `fold_header(text, source_idx, layer_idx)` reads the
  `conv_<source_idx>_biases`, `_scales`, `_rolling_mean`,
  `_rolling_variance` and `_weights` arrays from a header and returns the
  folded header named after `layer_idx`.

### `convweights.padding`

- `pad_kernel_3x3(weights, input_channels, output_channels)` follows every
  nine-value kernel with three zeros.
- `pad_kernel_1x1(weights, input_channels, output_channels)` puts each
  weight at the centre of a zero 3x3 kernel, then adds three zeros.
- `render_padded_header(layer_idx, biases, weights, suffix="\n\n")` writes
  the `group_<n>_biases` and `group_<n>_weights` arrays as `short`.

### `convweights.interleave`

- `interleave_weights(weights, output_channels, input_fold_factor, n_max=32)`
  takes padded weights in which each output channel owns
  `input_fold_factor` blocks of `n_max` twelve-value kernels, and returns
  block 0 of every channel, then block 1 of every channel, and so on.
- `render_interleaved_header(layer_idx, biases, weights)` writes the
  `group_<n>_weight_it.h` text.

All functions raise `ValueError` when given too few values for the shape
asked for.

## Example

```python
from convweights.cheader import read_arrays
from convweights.batchnorm import fold_batch_norm, render_folded_header

arrays = read_arrays("conv_0_weight.h")
folded = fold_batch_norm(
    arrays["conv_0_biases"],
    arrays["conv_0_scales"],
    arrays["conv_0_rolling_mean"],
    arrays["conv_0_rolling_variance"],
    arrays["conv_0_weights"],
)
print(render_folded_header(0, folded))
```

## What this package does not do

- There is no command-line tool and no driver that converts a whole
  network's layers in one go; each step is a library call.
- It does not convert folded floats to 16-bit fixed-point values. The
  padding and interleaving functions take integer weights that you have
  already quantized.