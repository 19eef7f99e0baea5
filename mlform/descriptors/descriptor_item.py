from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Slot(StrEnum):
    """ Mount regions a descriptor subtree can belong to. """
    INPUTS = "inputs"
    REPORT = "report"
    LAYOUT = "layout"


@dataclass(frozen=True)
class DescriptorItem:
    """ Intermediate node between a validated payload and its markup.

    Built fresh by a strategy on every render and discarded after serialization. The child slot allows arbitrary depth,
    although the bundled strategies never nest more than one level. """
    tag: str
    props: dict[str, Any] = field(default_factory=dict)
    child: 'DescriptorItem | None' = None
    slot: Slot = Slot.INPUTS
