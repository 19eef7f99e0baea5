from .element_ import CustomElement_
from ..framework.custom_elements import custom_elements


@custom_elements.define
class ClassifierPrediction(CustomElement_):
    """ Shows class probabilities returned by a classifier. """
    __tag_name__ = "classifier-prediction"
    observed_attributes = ("title", "mapping", "probabilities", "details")
