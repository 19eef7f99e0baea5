from enum import StrEnum


class FieldTypes(StrEnum):
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    CATEGORY = "category"
    DATE = "date"


class ModelTypes(StrEnum):
    CLASSIFIER = "classifier"
    REGRESSOR = "regressor"
