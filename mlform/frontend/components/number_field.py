from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class NumberField(CustomElement_):
    """ Numeric input with optional unit and bounds. """
    __tag_name__ = "number-field"
    observed_attributes = ("unit", "step", "min", "max", "defaultValue", "placeholder")
