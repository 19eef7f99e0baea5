from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class MLLayout(CustomElement_):
    """ Form layout shell. Hosts the inputs and report regions. """
    __tag_name__ = "ml-layout"
    observed_attributes = ()
