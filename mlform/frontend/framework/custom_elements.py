from ..components.element_ import CustomElement_
from ...utilities.logger import logger
from ...utilities.setup_error import SetupError


class CustomElementRegistry:
    """ Keeps track of which component implementations have been imported. A tag is defined once the module implementing it has run. """

    def __init__(self) -> None:
        self._elements: dict[str, type[CustomElement_]] = {}

    def define(self, element_cls: type[CustomElement_]) -> type[CustomElement_]:
        """ Register a component class by its tag name. Returns the class so this can be used as a decorator. """
        tag = getattr(element_cls, "__tag_name__", None)
        if not isinstance(tag, str) or "-" not in tag:
            raise SetupError(f"{element_cls.__name__} must declare a hyphenated __tag_name__, got {tag!r}.")
        if tag in self._elements:
            raise SetupError(f"Custom element '{tag}' is already defined by {self._elements[tag].__name__}.")
        self._elements[tag] = element_cls
        logger.debug(f"Defined custom element '{tag}'")
        return element_cls

    def get(self, tag: str) -> type[CustomElement_] | None:
        """ Returns None if no element is defined under tag. """
        return self._elements.get(tag)

    def is_defined(self, tag: str) -> bool:
        return tag in self._elements

    def tags(self) -> list[str]:
        return list(self._elements)

# Module-level stateful variable, populated as component modules are imported
custom_elements = CustomElementRegistry()
