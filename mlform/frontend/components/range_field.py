from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class RangeField(CustomElement_):
    """ Slider used for optional numeric fields with both bounds and a value. """
    __tag_name__ = "range-field"
    observed_attributes = ("unit", "step", "min", "max", "defaultValue")
