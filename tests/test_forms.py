"""Tests for turning form fields into a profile."""

import pytest

from forms import InvalidProfile, ProfileForm, profile_from_form
from models import UserProfile


def test_profile_from_form_parses_strings(form_data) -> None:
    profile = profile_from_form(**form_data)

    assert profile == UserProfile(
        sex="male", age=30, weight=75.0, height=175.0, activity=1.55, goal="maintain"
    )
    assert isinstance(profile.age, int)


def test_profile_from_form_accepts_numbers() -> None:
    profile = profile_from_form("female", 42, 61.5, 168, 1.9, "pressure")

    assert profile.weight == 61.5
    assert profile.activity == 1.9


@pytest.mark.parametrize(
    "field,value",
    [
        ("sex", "other"),
        ("age", "10"),
        ("age", "101"),
        ("age", "30.5"),
        ("age", "thirty"),
        ("weight", "29.9"),
        ("weight", "nan"),
        ("weight", "inf"),
        ("height", "251"),
        ("height", ""),
        ("activity", "1.3"),
        ("activity", "lots"),
        ("goal", "bulk"),
    ],
)
def test_profile_from_form_rejects(form_data, field, value) -> None:
    form_data[field] = value

    with pytest.raises(InvalidProfile) as exc_info:
        profile_from_form(**form_data)

    assert exc_info.value.field == field


def test_invalid_profile_message_names_range(form_data) -> None:
    form_data["age"] = "12"

    with pytest.raises(InvalidProfile, match="Age must be between 15 and 100."):
        profile_from_form(**form_data)


def test_invalid_profile_is_value_error() -> None:
    assert issubclass(InvalidProfile, ValueError)


def test_profile_form_coerces_form_strings() -> None:
    form = ProfileForm(
        sex="female", age="28", weight="60", height="166", activity="1.2", goal="sugar"
    )

    assert form.age == 28
    assert form.activity == 1.2
    assert form.to_profile() == UserProfile(
        sex="female", age=28, weight=60.0, height=166.0, activity=1.2, goal="sugar"
    )


@pytest.mark.parametrize("field", ["weight", "height"])
def test_out_of_range_message_names_field(form_data, field) -> None:
    form_data[field] = "1000"

    with pytest.raises(InvalidProfile, match=f"{field.capitalize()} must be between"):
        profile_from_form(**form_data)
