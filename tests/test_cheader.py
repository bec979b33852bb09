import pytest

from convweights.cheader import (
    HeaderParseError,
    format_array,
    parse_arrays,
    read_arrays,
)


def test_parse_short_and_float_arrays():
    text = (
        "#ifndef X\n#define X\n"
        "short group_1_biases[]={183,\n-33,\n208};\n\n"
        "float conv_0_scales[] = { 1.5f, -0.25 };\n#endif\n"
    )
    arrays = parse_arrays(text)
    assert list(arrays) == ["group_1_biases", "conv_0_scales"]
    assert arrays["group_1_biases"] == [183, -33, 208]
    assert arrays["conv_0_scales"] == [1.5, -0.25]
    assert all(isinstance(v, int) for v in arrays["group_1_biases"])


def test_comments_are_ignored():
    text = (
        "// short skipped[]={1,2};\n"
        "/* float other[]={3.0}; */\n"
        "short kept[]={4, 5,}; // trailing\n"
    )
    assert parse_arrays(text) == {"kept": [4, 5]}


def test_qualified_type_uses_last_word():
    arrays = parse_arrays("static const float w[4]={0.5,1};")
    assert arrays == {"w": [0.5, 1.0]}


def test_bad_integer_raises():
    with pytest.raises(HeaderParseError):
        parse_arrays("short a[]={1, 2.5};")


def test_empty_element_raises():
    with pytest.raises(HeaderParseError):
        parse_arrays("short a[]={1,,2};")


def test_duplicate_name_raises():
    with pytest.raises(HeaderParseError):
        parse_arrays("short a[]={1};\nshort a[]={2};")


def test_format_float_array_layout():
    text = format_array("float", "x", [1.5, -2.0], "\n")
    assert text == "float x[]={1.500000,\n-2.000000};\n"


def test_format_short_array_layout():
    text = format_array("short", "group_0_biases", [183, -33], "\n\n")
    assert text == "short group_0_biases[]={183,\n-33};\n\n"


def test_format_empty_raises():
    with pytest.raises(ValueError):
        format_array("short", "a", [], "\n")


@pytest.mark.parametrize(
    "ctype,values",
    [("short", [0, -1, 32767, -32768]), ("float", [0.125, -3.5, 100.0])],
)
def test_format_parse_round_trip(ctype, values):
    text = format_array(ctype, "arr", values, "\n")
    assert parse_arrays(text) == {"arr": values}


def test_read_arrays_from_file(tmp_path):
    path = tmp_path / "conv_0_weight_bn_short.h"
    path.write_text(format_array("short", "conv_0_biases_bn_short", [7, -8]))
    assert read_arrays(path) == {"conv_0_biases_bn_short": [7, -8]}