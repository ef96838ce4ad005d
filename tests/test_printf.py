import io

import pytest

from miniprintf.printf import handle_specifier, printf


@pytest.fixture
def out():
    return io.StringIO()


def test_plain_text(out):
    assert printf("hello world", file=out) == 11
    assert out.getvalue() == "hello world"


def test_empty_format(out):
    assert printf("", file=out) == 0
    assert out.getvalue() == ""


def test_percent_literal(out):
    assert printf("100%%", file=out) == 4
    assert out.getvalue() == "100%"


def test_trailing_percent_written(out):
    assert printf("abc%", file=out) == 4
    assert out.getvalue() == "abc%"


def test_mixed_conversions(out):
    count = printf("%c %s %d", "x", "yz", 42, file=out)
    assert out.getvalue() == "x yz 42"
    assert count == len(out.getvalue())


def test_null_string_and_pointer(out):
    printf("%s %p", None, None, file=out)
    assert out.getvalue() == "(null) 0x0"


def test_hex_cases(out):
    printf("%x|%X", 3054, 3054, file=out)
    low, up = out.getvalue().split("|")
    assert int(low, 16) == 3054 and int(up, 16) == 3054
    assert low.upper() == up
    assert low == low.lower()


def test_signed_and_unsigned(out):
    printf("%i %u", -5, -5, file=out)
    signed, unsigned = out.getvalue().split()
    assert int(signed) == -5
    assert int(unsigned) == 2**32 - 5


def test_unknown_specifier_counts_minus_one(out):
    assert printf("a%yb", file=out) == 1
    assert out.getvalue() == "ab"


def test_missing_argument_raises(out):
    with pytest.raises(TypeError):
        printf("%d", file=out)


def test_extra_arguments_ignored(out):
    assert printf("%d", 3, 4, file=out) == 1
    assert out.getvalue() == "3"


def test_count_matches_output_length(out):
    count = printf("[%p] %s=%u (%x)%%", 0xBEEF, "key", 99, 99, file=out)
    assert count == len(out.getvalue())


def test_defaults_to_stdout(capsys):
    count = printf("%s!", "hi")
    assert capsys.readouterr().out == "hi!"
    assert count == 3


def test_handle_specifier_direct(out):
    assert handle_specifier(out, "d", iter([7])) == 1
    assert out.getvalue() == "7"


def test_handle_specifier_percent_consumes_nothing(out):
    args = iter([5])
    assert handle_specifier(out, "%", args) == 1
    assert next(args) == 5


def test_handle_specifier_unknown_raises(out):
    with pytest.raises(ValueError):
        handle_specifier(out, "q", iter([1]))