import enum

import pytest

from hargs import errors
from hargs.types import ArgType
from hargs.types import Boolean, String, Int, Double, Choice, EnumChoice
from hargs.types import BOOLEAN, STRING, INT, DOUBLE


class Direction(enum.Enum):
    NORTH = 0
    SOUTH = 180


class Shout:
    def __init__(self, text: str):
        self.text = text

    def __str__(self) -> str:
        return self.text.upper()


@pytest.mark.parametrize("value", ["", "False", "FALSE", "true", "yes", "0", "flase"])
def test_boolean_is_true_unless_exact_false(value):
    assert BOOLEAN.convert(value, "--flag") is True


def test_boolean_false_literal():
    assert BOOLEAN.convert("false", "--flag") is False


def test_boolean_has_no_parameter():
    assert Boolean.has_parameter is False
    assert BOOLEAN.description == ""


def test_string_is_identity():
    assert STRING.convert("", "--name") == ""
    assert STRING.convert(" spaced out ", "--name") == " spaced out "
    assert STRING.description == "{ String }"


@pytest.mark.parametrize(
    "value, expected",
    [("42", 42), ("-7", -7), ("+3", 3), ("007", 7), ("9223372036854775807", 2**63 - 1)],
)
def test_int_converts(value, expected):
    assert INT.convert(value, "--count") == expected


@pytest.mark.parametrize(
    "value",
    ["abc", "3.5", "", " 1", "1 ", "1_000", "0x10", "9223372036854775808", "٣"],
)
def test_int_rejects(value):
    with pytest.raises(errors.ParsingError) as info:
        INT.convert(value, "--count")

    assert info.value.option == "--count"
    assert info.value.value == value
    assert str(info.value) == (
        f"Option --count is expected to be integer number. {value} is provided."
    )


def test_int_description():
    assert INT.description == "{ Int }"
    assert INT.has_parameter is True


@pytest.mark.parametrize(
    "value, expected",
    [("3.14", 3.14), ("-2", -2.0), ("1e3", 1000.0), (".5", 0.5)],
)
def test_double_converts(value, expected):
    assert DOUBLE.convert(value, "--ratio") == expected


@pytest.mark.parametrize("value", ["abc", "", "1.0.0", " 1.5", "1_0.5"])
def test_double_rejects(value):
    with pytest.raises(errors.ParsingError, match="expected to be double number"):
        DOUBLE.convert(value, "--ratio")


def test_double_description():
    assert DOUBLE.description == "{ Double }"


def test_choice_converts_member():
    colors = Choice(["red", "green", "blue"])
    assert colors.convert("green", "--color") == "green"


def test_choice_error_lists_all_values():
    colors = Choice(["red", "green", "blue"])

    with pytest.raises(errors.ParsingError) as info:
        colors.convert("yellow", "--color")

    assert str(info.value) == (
        "Option --color is expected to be one of [red, green, blue]. yellow is provided."
    )


def test_choice_description_keeps_order():
    choice = Choice(["a", "b"])

    assert choice.description == "{ Value should be one of [a, b] }"
    assert choice.description == choice.description
    assert choice.values == ("a", "b")


def test_choice_does_not_follow_source_list():
    values = ["a", "b"]
    choice = Choice(values)
    values.append("c")

    with pytest.raises(errors.ParsingError):
        choice.convert("c", "--x")


def test_enum_choice_from_enum():
    direction = EnumChoice.from_enum(Direction)

    assert direction.convert("NORTH", "--dir") is Direction.NORTH
    assert direction.convert("SOUTH", "--dir") is Direction.SOUTH
    assert direction.names == ("NORTH", "SOUTH")
    assert direction.description == "{ Value should be one of [NORTH, SOUTH] }"


def test_enum_choice_is_case_sensitive():
    direction = EnumChoice.from_enum(Direction)

    with pytest.raises(errors.ParsingError) as info:
        direction.convert("north", "--dir")

    assert str(info.value) == (
        "Option --dir is expected to be one of [NORTH, SOUTH]. north is provided."
    )


def test_enum_choice_from_pairs():
    level = EnumChoice([("low", 1), ("high", 10)])

    assert level.convert("high", "--level") == 10
    assert level.description == "{ Value should be one of [low, high] }"


def test_enum_choice_uses_string_representation_of_names():
    shout = EnumChoice([(Shout("quiet"), 1)])
    assert shout.convert("QUIET", "--shout") == 1


def test_enum_choice_rejects_colliding_names():
    with pytest.raises(errors.ChoicesAreNotDistinct) as info:
        EnumChoice([(Shout("a"), 1), ("A", 2), ("b", 3)])

    assert list(info.value.duplicated) == ["A"]
    assert not isinstance(info.value, errors.ArgumentsError)


def test_conversion_is_repeatable():
    colors = Choice(["red"])

    for _ in range(2):
        assert INT.convert("5", "--n") == 5
        assert colors.convert("red", "--c") == "red"
        with pytest.raises(errors.ParsingError):
            colors.convert("blue", "--c")


def test_custom_type_plugs_in():
    class Percent(ArgType[float]):
        @property
        def description(self) -> str:
            return "{ Percent }"

        def convert(self, value: str, name: str) -> float:
            if not value.endswith("%"):
                raise errors.ParsingError(name, "percentage", value)
            return DOUBLE.convert(value[:-1], name) / 100

    percent = Percent()

    assert percent.has_parameter is True
    assert percent.convert("50%", "--share") == 0.5
    with pytest.raises(errors.ParsingError, match="percentage"):
        percent.convert("50", "--share")


def test_arg_type_is_abstract():
    with pytest.raises(TypeError):
        ArgType()


def test_fresh_instances_behave_like_shared_ones():
    assert Int().convert("1", "-n") == INT.convert("1", "-n")
    assert String().description == STRING.description
    assert Double().convert("2.5", "-r") == 2.5
