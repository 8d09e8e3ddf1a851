import pytest

from hephaestus.naming import camel_to_snake_case


def test_upper_camel_case():
    assert camel_to_snake_case("UpperCamelCase") == "upper_camel_case"


def test_lower_camel_case():
    assert camel_to_snake_case("lowerCamelCase") == "lower_camel_case"


@pytest.mark.parametrize("text", ["", "already_snake", "x", "abc123", "with space"])
def test_text_without_capitals_is_unchanged(text):
    assert camel_to_snake_case(text) == text


@pytest.mark.parametrize("text", ["AddAssign", "DivAssign", "Mul", "someLongName"])
def test_result_has_no_ascii_capitals(text):
    result = camel_to_snake_case(text)
    assert not any("A" <= char <= "Z" for char in result)


@pytest.mark.parametrize("text", ["AddAssign", "subAssign", "VectorBaseImpl"])
def test_conversion_is_idempotent(text):
    once = camel_to_snake_case(text)
    assert camel_to_snake_case(once) == once


def test_leading_capital_gets_no_underscore():
    result = camel_to_snake_case("Sub")
    assert not result.startswith("_")
    assert result == "sub"


def test_underscores_match_inner_capitals():
    text = "DivAssignMore"
    inner_capitals = sum(1 for char in text[1:] if char.isupper())
    assert camel_to_snake_case(text).count("_") == inner_capitals


def test_non_ascii_capitals_are_left_alone():
    assert camel_to_snake_case("ÄbcÖ") == "ÄbcÖ"