from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class TextField(CustomElement_):
    """ Free text input. """
    __tag_name__ = "text-field"
    observed_attributes = ("placeholder", "pattern", "defaultValue", "minlength", "maxlength")
