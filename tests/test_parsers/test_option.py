import pytest

from argtoken.exceptions import InvalidArgumentValue
from argtoken.parser import FallbackPolicy, Option, OptionType, classify


@pytest.mark.parametrize(
    "value, expected",
    [
        ("string", OptionType.STRING),
        ("str", OptionType.STRING),
        ("NUMBER", OptionType.NUMBER),
        ("int", OptionType.NUMBER),
        ("float", OptionType.NUMBER),
        ("num", OptionType.NUMBER),
        ("bool", OptionType.BOOLEAN),
        (" Flag ", OptionType.BOOLEAN),
        (OptionType.BOOLEAN, OptionType.BOOLEAN),
    ],
)
def test_option_type_aliases(value, expected):
    assert OptionType(value) is expected


def test_option_type_invalid():
    with pytest.raises(ValueError) as excinfo:
        OptionType("list")
    assert "Must be one of: string, number, boolean" in str(excinfo.value)


def test_option_type_str():
    assert str(OptionType.NUMBER) == "number"
    assert OptionType.choices() == [
        OptionType.STRING,
        OptionType.NUMBER,
        OptionType.BOOLEAN,
    ]


def test_option_coerce_dispatches_by_type():
    string = Option(name="name", dest="name", fallback=FallbackPolicy(enabled="x"))
    number = Option(
        name="count",
        dest="count",
        type=OptionType.NUMBER,
        fallback=FallbackPolicy(disabled=-1),
    )
    boolean = Option(name="color", dest="color", type=OptionType.BOOLEAN)

    assert string.coerce(classify("--name")) == "x"
    assert number.coerce(classify("--no-count")) == -1
    assert number.coerce(classify("--count=2.5")) == 2.5
    assert boolean.coerce(classify("--no-color")) is False


def test_option_custom_message():
    option = Option(name="port", dest="port", type=OptionType.NUMBER, message="bad port")
    with pytest.raises(InvalidArgumentValue) as excinfo:
        option.coerce(classify("--port=http"))
    assert str(excinfo.value) == "bad port"


@pytest.mark.parametrize(
    "option_type, expected",
    [
        (OptionType.STRING, "--level=<string>"),
        (OptionType.NUMBER, "--level=<number>"),
        (OptionType.BOOLEAN, "--[no-]level[=<boolean>]"),
    ],
)
def test_usage_text(option_type, expected):
    option = Option(name="level", dest="level", type=option_type)
    assert option.get_usage_text() == expected
