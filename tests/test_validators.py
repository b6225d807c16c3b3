import pytest

from wonderland.exceptions import ValidationError
from wonderland.transformers import validators


@pytest.mark.parametrize("value", [None, ""])
def test_required_rejects_missing(value):
    with pytest.raises(ValidationError, match="title is required"):
        validators.required(value, "title")


@pytest.mark.parametrize("value", [0, False, "x", " "])
def test_required_accepts_present_values(value):
    assert validators.required(value, "field") is True


@pytest.mark.parametrize("value", ["elf@northpole.com", "a.b@c.co.uk"])
def test_email_accepts_valid(value):
    assert validators.email(value)


@pytest.mark.parametrize("value", ["", "no-at.com", "two@@signs.com", "a@b", "sp ace@x.com", "a@b.com\n", None])
def test_email_rejects_invalid(value):
    with pytest.raises(ValidationError, match="Invalid email format"):
        validators.email(value)


def test_length_bounds():
    assert validators.length("abc", 1, 3, "name")
    with pytest.raises(ValidationError, match="name must be between 4 and 10 characters"):
        validators.length("abc", 4, 10, "name")
    with pytest.raises(ValidationError):
        validators.length(None, 1, 10, "name")


def test_assert_enum_rejects_unknown_value():
    assert validators.assert_enum("high", ("low", "medium", "high"), "priority")
    with pytest.raises(ValidationError, match="priority must be one of: low, medium, high"):
        validators.assert_enum("urgent", ("low", "medium", "high"), "priority")


def test_coerce_enum_falls_back_to_default():
    assert validators.coerce_enum("naughty", ("nice", "naughty"), "nice") == "naughty"
    assert validators.coerce_enum("invalid", ("nice", "naughty"), "nice") == "nice"
    assert validators.coerce_enum(None, ("nice", "naughty"), "nice") == "nice"
