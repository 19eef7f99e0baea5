from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class CategoryField(CustomElement_):
    """ Single choice among optionList. """
    __tag_name__ = "category-field"
    observed_attributes = ("optionList", "defaultValue")
