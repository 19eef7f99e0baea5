"""
Payload schemas for the bundled field and report types.

Cross-field checks raise ValueError from model validators, which pydantic reports as a single issue located at the payload.
"""

import re
from typing import Annotated, Literal, Self

from pydantic import AwareDatetime, Field, model_validator

from ..extensions.base_schemas import BaseField, BaseReport

NUMBER_MIN_MAX_MESSAGE = "The minimum value must be less than or equal to the maximum value"
NUMBER_VALUE_MIN_MESSAGE = "The selected value must be greater than or equal to the minimum value"
NUMBER_VALUE_MAX_MESSAGE = "The selected value must be less than or equal to the maximum value"

TEXT_PATTERN_MESSAGE = "Invalid regex pattern"
TEXT_MIN_MAX_MESSAGE = "Minimum length must be less than or equal to maximum length"
TEXT_VALUE_MIN_MESSAGE = "Minimum length is {min_length} characters"
TEXT_VALUE_MAX_MESSAGE = "Maximum length of {max_length} characters exceeded."

DATE_MIN_MAX_MESSAGE = "The minimum date must be earlier than or equal to the maximum date"
DATE_VALUE_MIN_MESSAGE = "The selected date must be later than or equal to the minimum date"
DATE_VALUE_MAX_MESSAGE = "The selected date must be earlier than or equal to the maximum date"

VALUE_NOT_IN_OPTIONS_MESSAGE = "The value must match one of the allowed options"


Number = int | float
""" Keeps integral JSON numbers as ints so they serialize without a trailing .0 """
PositiveNumber = Annotated[int, Field(gt=0)] | Annotated[float, Field(gt=0)]
Probability = Annotated[int, Field(ge=0, le=1)] | Annotated[float, Field(ge=0.0, le=1.0)]


def _exceeds(low, high) -> bool:
    """ True only when both bounds are set and low > high. """
    return low is not None and high is not None and low > high


class NumberField(BaseField):
    type: Literal["number"]
    min: Number | None = None
    max: Number | None = None
    step: PositiveNumber = 1
    placeholder: str | None = None
    value: Number | None = None
    unit: str | None = None

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        if _exceeds(self.min, self.max):
            raise ValueError(NUMBER_MIN_MAX_MESSAGE)
        if _exceeds(self.min, self.value):
            raise ValueError(NUMBER_VALUE_MIN_MESSAGE)
        if _exceeds(self.value, self.max):
            raise ValueError(NUMBER_VALUE_MAX_MESSAGE)
        return self


class TextField(BaseField):
    type: Literal["text"]
    value: str | None = None
    placeholder: str | None = None
    minLength: Annotated[int, Field(ge=0)] | None = None
    maxLength: Annotated[int, Field(ge=0)] | None = None
    pattern: str | None = None

    @model_validator(mode="after")
    def check_lengths(self) -> Self:
        if self.pattern is not None:
            try:
                re.compile(self.pattern)
            except re.error:
                raise ValueError(TEXT_PATTERN_MESSAGE)
        if _exceeds(self.minLength, self.maxLength):
            raise ValueError(TEXT_MIN_MAX_MESSAGE)
        length = len(self.value) if self.value is not None else None
        if _exceeds(self.minLength, length):
            raise ValueError(TEXT_VALUE_MIN_MESSAGE.format(min_length=self.minLength))
        if _exceeds(length, self.maxLength):
            raise ValueError(TEXT_VALUE_MAX_MESSAGE.format(max_length=self.maxLength))
        return self


class BooleanField(BaseField):
    type: Literal["boolean"]
    value: bool | None = None


class CategoryField(BaseField):
    type: Literal["category"]
    value: str | None = None
    options: Annotated[list[str], Field(min_length=1)]

    @model_validator(mode="after")
    def check_value_in_options(self) -> Self:
        if self.value is not None and self.value not in self.options:
            raise ValueError(VALUE_NOT_IN_OPTIONS_MESSAGE)
        return self


class DateField(BaseField):
    type: Literal["date"]
    value: AwareDatetime | None = None
    min: AwareDatetime | None = None
    max: AwareDatetime | None = None
    step: Annotated[int, Field(ge=1)] = 1

    @model_validator(mode="after")
    def check_bounds(self) -> Self:
        if _exceeds(self.min, self.max):
            raise ValueError(DATE_MIN_MAX_MESSAGE)
        if _exceeds(self.value, self.max):
            raise ValueError(DATE_VALUE_MAX_MESSAGE)
        if _exceeds(self.min, self.value):
            raise ValueError(DATE_VALUE_MIN_MESSAGE)
        return self


class ClassifierModel(BaseReport):
    type: Literal["classifier"]
    mapping: list[Annotated[str, Field(min_length=1)]] | None = None
    probabilities: Annotated[
        list[Annotated[list[Probability], Field(min_length=1)]],
        Field(min_length=1),
    ] | None = None
    details: bool = False


class RegressorModel(BaseReport):
    type: Literal["regressor"]
    values: Annotated[list[Number], Field(min_length=1)] | None = None
    unit: str | None = None
    interval: tuple[Number, Number] | None = None
