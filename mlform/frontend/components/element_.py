from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, runtime_checkable

from ..utilities.html import Html


@runtime_checkable
class DrawableProtocol(Protocol):
    """ Define a Protocol for any object that implements a draw method. """
    def draw(self) -> Html: ...

def draw(drawable: 'DrawableProtocol | None') -> Html:
    if drawable is None:
        return Html()
    return drawable.draw()

class Viewable(ABC):
    """ Asserts that a class is Viewable. """
    @abstractmethod
    def draw(self) -> Html:
        """ Returns HTML for the Viewable. """
        raise NotImplementedError

class CustomElement_(ABC):
    """ Describes a UI component that the markup refers to by tag name.

    Conventions:
        - Each component lives in its own module under mlform.frontend.components and defines itself on import:
            custom_elements.define(MyElement)
        - __tag_name__ must contain a hyphen, as custom element names do.
    """

    __tag_name__: ClassVar[str]
    observed_attributes: ClassVar[tuple[str, ...]] = ()
