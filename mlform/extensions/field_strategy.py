from abc import ABC, abstractmethod
from typing import Any, NamedTuple, TypeVar

from .base_schemas import BaseField
from ..descriptors.descriptor_item import DescriptorItem, Slot
from ..descriptors.descriptor_strategy import DescriptorStrategy
from ..utilities.special_values import FIELD_WRAPPER_TAG

F = TypeVar('F', bound=BaseField)


class Control(NamedTuple):
    """ The element a strategy renders for one payload, before it is placed in a slot. """
    tag: str
    props: dict[str, Any]


class FieldStrategy(DescriptorStrategy[F], ABC):
    """ Input fields. The control is wrapped in a labeled field-wrapper and the whole subtree goes to the inputs slot. """

    @abstractmethod
    def build_control(self, field: F) -> Control:
        raise NotImplementedError

    def build_descriptor(self, field: F) -> DescriptorItem:
        control = self.build_control(field)
        return DescriptorItem(
            tag=FIELD_WRAPPER_TAG,
            props={
                "title": field.title,
                "description": field.description or "",
            },
            child=DescriptorItem(tag=control.tag, props=control.props, slot=Slot.INPUTS),
            slot=Slot.INPUTS,
        )
