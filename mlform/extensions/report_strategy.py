from abc import ABC, abstractmethod
from typing import TypeVar

from .base_schemas import BaseReport
from .field_strategy import Control
from ..descriptors.descriptor_item import DescriptorItem, Slot
from ..descriptors.descriptor_strategy import DescriptorStrategy

R = TypeVar('R', bound=BaseReport)


class ReportStrategy(DescriptorStrategy[R], ABC):
    """ Model reports. The control is emitted directly into the report slot. """

    @abstractmethod
    def build_control(self, model: R) -> Control:
        raise NotImplementedError

    def build_descriptor(self, model: R) -> DescriptorItem:
        control = self.build_control(model)
        return DescriptorItem(tag=control.tag, props=control.props, slot=Slot.REPORT)
