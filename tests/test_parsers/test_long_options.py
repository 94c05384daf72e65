import pytest

from flagparse import (
    FlagParser,
    InsufficientArgumentsError,
    TypeCoercionError,
    UnexpectedValueError,
    UnknownOptionError,
)


def build_parser() -> FlagParser:
    parser = FlagParser()
    parser.string("path").short_opt("p")
    parser.number("num").short_opt("n")
    parser.flag("force").short_opt("f")
    return parser


def test_value_may_contain_equals():
    parser = build_parser()
    assert parser.parse(["--path=a=b"])["path"] == "a=b"


def test_empty_attached_value():
    parser = build_parser()
    assert parser.parse(["--path="])["path"] == ""


def test_empty_attached_number_fails():
    parser = build_parser()
    with pytest.raises(TypeCoercionError):
        parser.parse(["--num="])


def test_separate_value_token():
    parser = build_parser()
    result = parser.parse(["--path", "--force"])
    assert result["path"] == "--force"
    assert result["force"] is False


def test_last_value_wins():
    parser = build_parser()
    result = parser.parse(["--path", "first", "-p", "second"])
    assert result["path"] == "second"


def test_unknown_long_option():
    parser = build_parser()
    with pytest.raises(UnknownOptionError) as excinfo:
        parser.parse(["--nope"])
    assert excinfo.value.token == "--nope"
    assert "--nope" in str(excinfo.value)


def test_unknown_long_option_with_value():
    parser = build_parser()
    with pytest.raises(UnknownOptionError) as excinfo:
        parser.parse(["--nope=1"])
    assert excinfo.value.option == "--nope"

    with pytest.raises(UnknownOptionError):
        parser.parse(["--=value"])


def test_value_on_zero_arity_flag():
    parser = build_parser()
    with pytest.raises(UnexpectedValueError) as excinfo:
        parser.parse(["--force=yes"])
    assert excinfo.value.option == "--force"


def test_missing_long_value():
    parser = build_parser()
    with pytest.raises(InsufficientArgumentsError) as excinfo:
        parser.parse(["--path"])
    assert excinfo.value.option == "--path"


def test_bad_number():
    parser = build_parser()
    with pytest.raises(TypeCoercionError) as excinfo:
        parser.parse(["--num", "abc"])
    assert excinfo.value.token == "abc"
    assert excinfo.value.option == "--num"
    assert "abc" in str(excinfo.value)


def test_end_of_options():
    parser = build_parser()
    result = parser.parse(["-f", "--", "--not-a-flag", "foo", "-p", "--"])
    assert result.positionals == ("--not-a-flag", "foo", "-p", "--")
    assert result["force"] is True
    assert result["path"] is None


def test_end_of_options_unregistered():
    parser = FlagParser()
    result = parser.parse(["--", "--not-a-flag", "foo"])
    assert result.positionals == ("--not-a-flag", "foo")


def test_end_of_options_as_value():
    parser = build_parser()
    result = parser.parse(["--path", "--", "tail"])
    assert result["path"] == "--"
    assert result.positionals == ("tail",)


def test_end_of_options_keeps_raw_tokens():
    parser = FlagParser()
    result = parser.parse(["--", 1, True])
    assert result.positionals == (1, True)


@pytest.mark.parametrize("token", ["nan", "inf", "1_0"])
def test_non_finite_and_grouped_numbers_fail(token):
    parser = build_parser()
    with pytest.raises(TypeCoercionError) as excinfo:
        parser.parse(["--num", token])
    assert excinfo.value.token == token
    assert excinfo.value.option == "--num"
