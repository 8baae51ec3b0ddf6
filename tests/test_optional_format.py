import pytest

from chesskit.optional_format import format_optional, select_spec


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __format__(self, spec):
        if spec == "c":
            return f"{self.x}:{self.y}"
        if spec == "":
            return f"({self.x}, {self.y})"
        raise ValueError("Invalid format args for Point.")


CASES = [
    ("", "(3, 14)", ""),
    ("[c]", "3:14", ""),
    ("?", "(3, 14)", ""),
    ("??", "(3, 14)", "?"),
    ("?[]", "(3, 14)", "[]"),
    ("[]?", "(3, 14)", ""),
    ("[][]", "(3, 14)[]", ""),
    ("[][][]", "(3, 14)[][]", ""),
    ("?foo", "(3, 14)", "foo"),
    ("[c]?foo", "3:14", "foo"),
    ("bar[]", "bar(3, 14)", ""),
    ("bar[]?foo", "bar(3, 14)", "foo"),
    ("bar[c]", "bar3:14", ""),
    ("bar[c]?foo", "bar3:14", "foo"),
    ("[]baz", "(3, 14)baz", ""),
    ("[]baz?foo", "(3, 14)baz", "foo"),
    ("[c]baz", "3:14baz", ""),
    ("[c]baz?foo", "3:14baz", "foo"),
    ("bar[]baz", "bar(3, 14)baz", ""),
    ("bar[c]baz", "bar3:14baz", ""),
    ("bar[]baz?foo", "bar(3, 14)baz", "foo"),
    ("bar[c]baz?foo", "bar3:14baz", "foo"),
]


@pytest.mark.parametrize("spec, present, _missing", CASES)
def test_format_non_null_and_valid_spec(spec, present, _missing):
    assert format_optional(Point(3, 14), spec) == present


@pytest.mark.parametrize("spec, _present, missing", CASES)
def test_format_null_and_valid_spec(spec, _present, missing):
    assert format_optional(None, spec) == missing


@pytest.mark.parametrize("spec", ["[", "[bar", "]", "baz]"])
@pytest.mark.parametrize("value", [None, Point(3, 14)])
def test_malformed_spec_raises(spec, value):
    with pytest.raises(ValueError):
        format_optional(value, spec)


@pytest.mark.parametrize("spec", ["[d]", "[car]", "[:d]"])
def test_invalid_inner_spec_raises(spec):
    with pytest.raises(ValueError):
        format_optional(Point(3, 14), spec)


def test_select_spec_defaults_to_first_token():
    assert select_spec("", ("v", "c")) == "v"
    assert select_spec("", ("fen", "ascii", "lists")) == "fen"


def test_select_spec_picks_named_token():
    assert select_spec("c", ("v", "c")) == "c"
    assert select_spec("lists", ("fen", "ascii", "lists")) == "lists"


@pytest.mark.parametrize("spec", ["x", "cc", "vc", "fe", "fenx"])
def test_select_spec_rejects_unknown(spec):
    with pytest.raises(ValueError):
        select_spec(spec, ("v", "c", "fen"))