import logging
from typing import Literal, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from constants import ACTIVITY_LEVELS
from models import UserProfile

logger = logging.getLogger("nutrition_calculator.forms")

AGE_RANGE = (15, 100)
WEIGHT_RANGE = (30, 300)      # kg
HEIGHT_RANGE = (100, 250)     # cm

FIELD_MESSAGES = {
    "sex": "Please choose male or female.",
    "age": f"Age must be between {AGE_RANGE[0]} and {AGE_RANGE[1]}.",
    "weight": f"Weight must be between {WEIGHT_RANGE[0]} and {WEIGHT_RANGE[1]}.",
    "height": f"Height must be between {HEIGHT_RANGE[0]} and {HEIGHT_RANGE[1]}.",
    "activity": "Please choose an activity level.",
    "goal": "Please choose a health goal.",
}

Number = Union[str, int, float]


class InvalidProfile(ValueError):
    """Raised when submitted form data cannot make a UserProfile."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class ProfileForm(BaseModel):
    """Calculator form fields, with the limits the form inputs advertise."""

    sex: Literal["male", "female"]
    age: int = Field(ge=AGE_RANGE[0], le=AGE_RANGE[1])
    weight: float = Field(ge=WEIGHT_RANGE[0], le=WEIGHT_RANGE[1], allow_inf_nan=False)
    height: float = Field(ge=HEIGHT_RANGE[0], le=HEIGHT_RANGE[1], allow_inf_nan=False)
    activity: float
    goal: Literal["maintain", "lose", "gain", "sugar", "cholesterol", "pressure"]

    @field_validator("activity")
    @classmethod
    def known_activity_level(cls, value: float) -> float:
        if value not in ACTIVITY_LEVELS:
            raise ValueError("unknown activity multiplier")
        return value

    def to_profile(self) -> UserProfile:
        return UserProfile(
            sex=self.sex,
            age=self.age,
            weight=self.weight,
            height=self.height,
            activity=self.activity,
            goal=self.goal,
        )


def profile_from_form(
    sex: str,
    age: Number,
    weight: Number,
    height: Number,
    activity: Number,
    goal: str,
) -> UserProfile:
    """
    Build a UserProfile from raw form fields. Raises InvalidProfile naming
    the first bad field.
    """
    try:
        form = ProfileForm(
            sex=sex,
            age=age,
            weight=weight,
            height=height,
            activity=activity,
            goal=goal,
        )
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0])
        logger.warning("Rejected profile input: field=%s reason=%s", field, error["msg"])
        raise InvalidProfile(field, FIELD_MESSAGES.get(field, error["msg"]))

    return form.to_profile()
