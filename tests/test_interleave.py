import pytest

from convweights.cheader import parse_arrays
from convweights.interleave import interleave_weights, render_interleaved_header


def test_single_fold_is_identity():
    weights = list(range(2 * 12 * 3))
    assert interleave_weights(weights, 2, 1, n_max=3) == weights


def test_worked_example_two_folds():
    weights = list(range(48))
    result = interleave_weights(weights, 2, 2, n_max=1)
    expected = (
        list(range(0, 12))
        + list(range(24, 36))
        + list(range(12, 24))
        + list(range(36, 48))
    )
    assert result == expected


def test_result_is_permutation():
    weights = list(range(3 * 4 * 12 * 2))
    result = interleave_weights(weights, 3, 4, n_max=2)
    assert sorted(result) == weights
    assert len(result) == len(weights)


def test_extra_weights_are_ignored():
    weights = list(range(24)) + [99, 99]
    assert interleave_weights(weights, 1, 2, n_max=1) == list(range(24))


def test_too_few_weights():
    with pytest.raises(ValueError):
        interleave_weights(list(range(23)), 1, 2, n_max=1)


def test_non_positive_arguments():
    with pytest.raises(ValueError):
        interleave_weights([0] * 12, 1, 0, n_max=1)
    with pytest.raises(ValueError):
        interleave_weights([0] * 12, 1, 1, n_max=0)


def test_render_layout():
    text = render_interleaved_header(3, [1, 2], [5, -6, 7])
    assert text.startswith("short group_3_biases[]={1,\n2};\n\n")
    assert text.endswith("short group_3_weights[]={5,\n-6,\n7};")


def test_render_round_trip():
    biases = [10, -20, 30]
    weights = list(range(-5, 5))
    arrays = parse_arrays(render_interleaved_header(12, biases, weights))
    assert arrays == {"group_12_biases": biases, "group_12_weights": weights}