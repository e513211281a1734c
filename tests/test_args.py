import pytest

from dining.args import Args, ArgumentError, INT_MAX, is_number, parse_args, parse_int


def test_parse_int_int_max():
    assert parse_int("2147483647") == INT_MAX


def test_parse_int_overflow_raises():
    with pytest.raises(OverflowError):
        parse_int("2147483648")


def test_parse_int_skips_whitespace_and_stops_at_non_digit():
    assert parse_int(" \t\n-42abc") == -42


def test_parse_int_without_digits_is_zero():
    assert parse_int("abc") == 0
    assert parse_int("+") == 0


def test_parse_int_plus_sign():
    assert parse_int("+7") == 7


@pytest.mark.parametrize("text", ["0", "123", "+5", "+"])
def test_is_number_accepts(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", None, "-5", "1a", " 1", "1.5", "++1"])
def test_is_number_rejects(text):
    assert is_number(text) is False


def test_parse_args_four_arguments():
    args = parse_args(["5", "800", "200", "200"])
    assert args == Args(5, 800, 200, 200, None)


def test_parse_args_with_must_eat():
    args = parse_args(["5", "800", "200", "200", "7"])
    assert args.must_eat == 7
    assert args.n_philos == 5


@pytest.mark.parametrize("argv", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(ArgumentError) as info:
        parse_args(argv)
    assert str(info.value) == "Error: invalid number of arguments"


def test_parse_args_invalid_argument():
    with pytest.raises(ArgumentError) as info:
        parse_args(["5", "abc", "200", "200"])
    assert str(info.value) == "Error: invalid argument 'abc'"


def test_parse_args_negative_is_invalid_argument():
    with pytest.raises(ArgumentError) as info:
        parse_args(["-5", "800", "200", "200"])
    assert "invalid argument" in str(info.value)


@pytest.mark.parametrize(
    "argv",
    [["0", "800", "200", "200"], ["5", "800", "+", "200"], ["5", "9999999999", "200", "200"]],
)
def test_parse_args_non_positive(argv):
    with pytest.raises(ArgumentError) as info:
        parse_args(argv)
    assert str(info.value) == "Error: arguments must be positive integers"


@pytest.mark.parametrize("must_eat", ["0", "99999999999"])
def test_parse_args_bad_must_eat(must_eat):
    with pytest.raises(ArgumentError) as info:
        parse_args(["5", "800", "200", "200", must_eat])
    assert str(info.value) == "Error"