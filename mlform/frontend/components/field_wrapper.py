from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class FieldWrapper(CustomElement_):
    """ Labeled container around a single field control. """
    __tag_name__ = "field-wrapper"
    observed_attributes = ("title", "description")
