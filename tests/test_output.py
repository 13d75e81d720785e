import io

import pytest

from treasurehunt.chars import atoi
from treasurehunt.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("Moves counter", out)
    assert out.getvalue() == "Moves counter"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("Error", out)
    assert out.getvalue() == "Error\n"


def test_put_endl_none_writes_only_newline():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == "\n"


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 10, 12345, -1, -987, 2147483647])
def test_put_nbr_round_trips_through_atoi(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert atoi(out.getvalue()) == n


def test_put_nbr_negative_starts_with_minus():
    out = io.StringIO()
    put_nbr(-42, out)
    assert out.getvalue().startswith("-")


def test_writes_accumulate_on_stream():
    out = io.StringIO()
    put_str("ab", out)
    put_char("c", out)
    put_endl("d", out)
    assert out.getvalue() == "abcd\n"


def test_default_stream_is_stdout(capsys):
    put_str("Treasure")
    put_char("!")
    assert capsys.readouterr().out == "Treasure!"