from .field_types import FieldTypes, ModelTypes
from .schemas import BooleanField, CategoryField, ClassifierModel, DateField, NumberField, RegressorModel, TextField
from .boolean_strategy import BooleanStrategy
from .category_strategy import CategoryStrategy
from .classifier_strategy import ClassifierStrategy
from .date_strategy import DateStrategy
from .number_strategy import NumberStrategy
from .regressor_strategy import RegressorStrategy
from .text_strategy import TextStrategy


def default_strategies() -> list:
    """ Fresh instances of every bundled strategy, fields first. """
    return [
        TextStrategy(),
        NumberStrategy(),
        BooleanStrategy(),
        CategoryStrategy(),
        DateStrategy(),
        ClassifierStrategy(),
        RegressorStrategy(),
    ]
