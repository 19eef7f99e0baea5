from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class DateField(CustomElement_):
    """ Date picker. Bounds and value are ISO 8601 strings. """
    __tag_name__ = "date-field"
    observed_attributes = ("step", "min", "max", "defaultValue")
