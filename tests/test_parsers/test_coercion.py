import math

import pytest

from argtoken.exceptions import InvalidArgumentValue
from argtoken.parser import (
    FALSEY,
    TRUTHY,
    FallbackPolicy,
    classify,
    coerce_boolean,
    coerce_number,
    coerce_string,
    parse_number,
    resolve_fallback,
)

POLICY = {"enabled": "A", "disabled": "B", "enabledEmpty": "C", "disabledEmpty": "D"}


# --- resolve_fallback ---
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("--x", "A"),
        ("--no-x", "B"),
        ("--x=", "D"),
        ("--no-x=", "C"),
        ("--x=val", "val"),
        ("--no-x=val", "val"),
        ("positional", "positional"),
    ],
)
def test_fallback_precedence(raw, expected):
    assert classify(raw).string(POLICY) == expected
    assert resolve_fallback(classify(raw), "required", POLICY) == expected


@pytest.mark.parametrize("raw", ["--x", "--no-x", "--x=", "--no-x="])
def test_missing_slot_raises_with_supplied_message(raw):
    with pytest.raises(InvalidArgumentValue) as excinfo:
        resolve_fallback(classify(raw), "x is required", {})
    assert excinfo.value.message == "x is required"
    assert excinfo.value.exit_code == 22


def test_only_the_matching_slot_is_consulted():
    policy = FallbackPolicy(enabled="on")
    assert classify("--x").string(policy) == "on"
    with pytest.raises(InvalidArgumentValue):
        classify("--no-x").string(policy)
    with pytest.raises(InvalidArgumentValue):
        classify("--x=").string(policy)


def test_policy_accepts_fallback_policy_instance():
    policy = FallbackPolicy(disabled_empty="blank")
    assert resolve_fallback(classify("--x="), "required", policy) == "blank"


def test_positional_empty_string_uses_disabled_empty():
    assert classify("").string({"disabledEmpty": "D"}) == "D"


# --- string ---
def test_string_error_message_for_flag():
    with pytest.raises(InvalidArgumentValue) as excinfo:
        classify("--name").string()
    assert str(excinfo.value) == (
        "Argument --name must have a string value, e.g. --name=string"
    )


def test_string_error_message_for_positional():
    with pytest.raises(InvalidArgumentValue) as excinfo:
        coerce_string(classify(""))
    assert str(excinfo.value) == "Argument  must have a string value, e.g. <string>"


def test_string_custom_message():
    with pytest.raises(InvalidArgumentValue) as excinfo:
        classify("--name").string(message="name please")
    assert str(excinfo.value) == "name please"


def test_string_returns_fallback_of_any_type():
    assert classify("--tags").string({"enabled": ["a", "b"]}) == ["a", "b"]


# --- number ---
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("--n=42", 42),
        ("--n=-7", -7),
        ("--n=+3", 3),
        ("--n=3.5", 3.5),
        ("--n=1e3", 1000.0),
        ("--n=.5", 0.5),
        ("--n= 12 ", 12),
        ("--n=0x1F", 31),
        ("--n=0o17", 15),
        ("--n=0b101", 5),
        ("--n=007", 7),
        ("12", 12),
    ],
)
def test_number_values(raw, expected):
    result = classify(raw).number({})
    assert result == expected
    assert type(result) is type(expected)


def test_number_infinity():
    assert classify("--n=Infinity").number() == math.inf
    assert classify("--n=-Infinity").number() == -math.inf


@pytest.mark.parametrize(
    "raw",
    [
        "--n=abc",
        "--n=NaN",
        "--n=nan",
        "--n=inf",
        "--n=1_000",
        "--n=4,2",
        "--n=١٢",
        "--n= ",
    ],
)
def test_number_rejects_non_numbers(raw):
    with pytest.raises(InvalidArgumentValue) as excinfo:
        classify(raw).number({})
    assert "must have a number value, e.g. --n=123" in str(excinfo.value)


def test_number_error_message_for_positional():
    with pytest.raises(InvalidArgumentValue) as excinfo:
        coerce_number(classify("abc"))
    assert str(excinfo.value) == "Argument abc must have a number value, e.g. 123"


@pytest.mark.parametrize(
    "raw, expected",
    [("--number", 1), ("--no-number", -1), ("--number=", 0), ("--no-number=", 0)],
)
def test_number_fallbacks_bypass_conversion(raw, expected):
    policy = FallbackPolicy(enabled=1, disabled=-1, enabled_empty=0, disabled_empty=0)
    assert classify(raw).number(policy) == expected


def test_number_string_fallback_is_converted():
    assert classify("--n").number({"enabled": "8"}) == 8


@pytest.mark.parametrize("fallback", [float("nan"), True, "many", [1]])
def test_number_rejects_invalid_fallbacks(fallback):
    with pytest.raises(InvalidArgumentValue):
        classify("--n").number({"enabled": fallback})


def test_number_without_fallback_raises():
    with pytest.raises(InvalidArgumentValue):
        classify("--n").number()


# --- boolean ---
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("--flag", True),
        ("--no-flag", False),
        ("--flag=", True),
        ("--no-flag=", False),
        ("--flag=no", False),
        ("--no-flag=no", True),
        ("--flag=yes", True),
        ("--no-flag=yes", False),
        ("--flag=1", True),
        ("--flag=0", False),
        ("--flag=on", True),
        ("--flag=off", False),
        ("--flag=y", True),
        ("--flag=n", False),
        ("true", True),
        ("false", False),
    ],
)
def test_boolean_values(raw, expected):
    assert classify(raw).boolean() is expected


def test_boolean_vocabularies():
    assert TRUTHY == {"true", "1", "yes", "y", "on"}
    assert FALSEY == {"false", "0", "no", "n", "off"}
    assert not TRUTHY & FALSEY


@pytest.mark.parametrize(
    "raw", ["--flag=TRUE", "--flag=Yes", "--flag=maybe", "--flag= yes"]
)
def test_boolean_is_case_sensitive_and_strict(raw):
    with pytest.raises(InvalidArgumentValue) as excinfo:
        classify(raw).boolean()
    assert str(excinfo.value) == (
        f"Argument {raw} must have a boolean value, "
        "e.g. --flag or --no-flag or --flag=yes"
    )


def test_boolean_error_message_for_positional():
    with pytest.raises(InvalidArgumentValue) as excinfo:
        coerce_boolean(classify("perhaps"))
    assert str(excinfo.value) == "Argument perhaps must have a boolean value, e.g. yes"


def test_boolean_ignores_custom_message_on_success():
    assert classify("--flag").boolean(message="never shown") is True


# --- parse_number ---
@pytest.mark.parametrize(
    "text, expected",
    [
        ("10", 10),
        ("-0", 0),
        ("2.50", 2.5),
        ("1E-2", 0.01),
        ("0XfF", 255),
        ("", None),
        ("x1", None),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected
