from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class RegressorPrediction(CustomElement_):
    """ Shows predicted values and an optional interval. """
    __tag_name__ = "regressor-prediction"
    observed_attributes = ("title", "values", "unit", "interval")
