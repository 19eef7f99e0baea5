from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class BooleanField(CustomElement_):
    """ Checkbox style toggle. defaultValue is 'true' or 'false'. """
    __tag_name__ = "boolean-field"
    observed_attributes = ("defaultValue",)
