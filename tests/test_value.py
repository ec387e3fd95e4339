import pytest

from echoscript.value import Char, EchoScriptError, Value


def test_default_value_is_integer_zero():
    value = Value()
    assert value.is_int()
    assert value.as_int() == 0


def test_bool_is_not_int():
    value = Value(True)
    assert value.is_bool()
    assert not value.is_int()
    with pytest.raises(EchoScriptError, match="Value is not an integer"):
        value.as_int()


def test_equality_distinguishes_types():
    assert Value(1) != Value(True)
    assert Value(1) == Value(1)
    assert Value(Char("a")) != Value("a")
    assert len({Value(1), Value(1), Value(True)}) == 2


def test_unsupported_type_rejected():
    with pytest.raises(TypeError):
        Value([1, 2])


@pytest.mark.parametrize("text", ["", "ab"])
def test_char_must_be_single_character(text):
    with pytest.raises(ValueError):
        Char(text)


def test_char_code_and_str():
    char = Char("A")
    assert char.code == ord("A")
    assert str(char) == "A"


def test_as_bool():
    assert Value(False).as_bool() is False
    with pytest.raises(EchoScriptError, match="Value is not a boolean"):
        Value(1).as_bool()


def test_as_char():
    assert Value(Char("z")).as_char() == Char("z")
    with pytest.raises(EchoScriptError, match="Value is not a character"):
        Value("z").as_char()


def test_as_double():
    assert Value(2.5).as_double() == 2.5
    assert Value(7).as_double() == 7.0
    with pytest.raises(EchoScriptError, match="Value is not a number"):
        Value(True).as_double()


def test_as_number():
    assert Value(9).as_number() == 9
    assert Value(True).as_number() == 1
    assert Value(False).as_number() == 0
    assert Value(Char("A")).as_number() == ord("A")
    with pytest.raises(EchoScriptError, match="Value is not numeric"):
        Value(1.5).as_number()
    with pytest.raises(EchoScriptError, match="Value is not numeric"):
        Value("1").as_number()


def test_type_predicates():
    assert Value(1.0).is_float()
    assert Value("s").is_string()
    assert Value(Char("s")).is_char()
    assert not Value("s").is_char()


def test_to_string_of_scalars():
    assert Value(42).to_string() == "42"
    assert Value(-5).to_string() == "-5"
    assert Value(True).to_string() == "true"
    assert Value(False).to_string() == "false"
    assert Value("hi there").to_string() == "hi there"
    assert Value(Char("x")).to_string() == "x"


def test_integral_double_keeps_point_zero():
    assert Value(3.0).to_string() == "3.0"


def test_fractional_double():
    assert Value(2.5).to_string() == "2.5"
    assert Value(-0.75).to_string() == "-0.75"


def test_double_uses_six_significant_digits():
    assert Value(1 / 3).to_string() == "0.333333"


def test_large_fractional_double_uses_exponent():
    assert Value(1234567.5).to_string() == "1.23457e+06"


def test_str_matches_to_string():
    for data in (1, 2.5, "s", Char("c"), True):
        value = Value(data)
        assert str(value) == value.to_string()