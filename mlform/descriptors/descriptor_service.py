import asyncio
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import pydantic

from .descriptor_item import DescriptorItem, Slot
from .descriptor_registry import DescriptorRegistry
from .descriptor_strategy import DescriptorStrategy
from .loaders import Loader, load_component
from ..frontend.framework.mount_point import MountPoint
from ..frontend.framework.serialize import serialize_descriptors
from ..frontend.utilities.html import Html
from ..utilities.logger import logger
from ..utilities.special_values import BASELINE_COMPONENTS, LAYOUT_TAG
from ..utilities.unsupported_type_error import UnsupportedTypeError
from ..utilities.validation_error import ValidationError, ValidationIssue


"""
Descriptor Service

Every mount/render call runs four phases, strictly in order:

1. Ensure components
   - Resolve the strategy for every payload. An unknown type aborts the call before any loader runs.
   - Invoke the loader of each type not yet in loaded_types, together with the baseline loaders, and await them all at once.
   - A type is marked loaded when its loader is invoked, not when it resolves, so overlapping calls never load a type twice.
     A failed loader is not retried by this service.

2. Validate
   - The whole list is checked against the registry's combined schema. Any failure rejects the batch.

3. Parse and build
   - Each payload is parsed by its own strategy and turned into one DescriptorItem, in input order.

4. Serialize and mount
   - Items are filtered by slot, serialized and written into the matching region of the container.

NOTE: The registry must not be mutated while a call is in flight.
"""

class DescriptorService:
    """ Orchestrates loading, validation, building and serialization for one registry. """

    def __init__(self, registry: DescriptorRegistry | None = None, *, baseline_loaders: Iterable[Loader] | None = None):
        self.registry = registry if registry is not None else DescriptorRegistry()
        if baseline_loaders is None:
            baseline_loaders = [load_component(module_name) for module_name in BASELINE_COMPONENTS]
        self.baseline_loaders: tuple[Loader, ...] = tuple(baseline_loaders)
        self.loaded_types: set[str] = set()

    # Phase 1
    async def ensure_components(self, payloads: Sequence[Any]) -> None:
        strategies = [self.resolve_strategy(payload) for payload in self._as_list(payloads)]

        pending = [loader() for loader in self.baseline_loaders]
        for strategy in strategies:
            if strategy.type in self.loaded_types:
                continue
            self.loaded_types.add(strategy.type)
            logger.debug(f"Loading component for type '{strategy.type}'")
            pending.append(strategy.loader())
        await asyncio.gather(*pending)

    # Phase 2
    def validate(self, payloads: Sequence[Any]) -> list[pydantic.BaseModel]:
        return self.registry.validate(self._as_list(payloads))

    # Phase 3
    def build_descriptors(self, payloads: Sequence[Any]) -> list[DescriptorItem]:
        items = []
        for payload in self._as_list(payloads):
            strategy = self.resolve_strategy(payload)
            items.append(strategy.build_descriptor(strategy.parse(payload)))
        return items

    # Phase 4
    def to_html(self, items: Iterable[DescriptorItem], slot: Slot | str | None = None) -> Html:
        return serialize_descriptors(items, slot)

    async def mount(self, payloads: Sequence[Any], container: MountPoint) -> MountPoint:
        """ Draws the layout shell into container and writes the inputs markup into its inputs region.
        Nothing is written if any phase fails. """
        items = await self._prepare(payloads)
        markup = self.to_html(items, Slot.INPUTS)

        container.set_inner_html(Html())
        layout = container.region(Slot.LAYOUT, LAYOUT_TAG)
        layout.region(Slot.INPUTS).set_inner_html(markup)
        layout.region(Slot.REPORT)
        logger.debug(f"Mounted {len(items)} input descriptor(s)")
        return container

    async def render_report(self, payloads: Sequence[Any], container: MountPoint) -> MountPoint:
        """ Writes the report markup into the report region of container, leaving the inputs region untouched.
        If container has not been mounted, the report region is added directly to it. """
        items = await self._prepare(payloads)
        markup = self.to_html(items, Slot.REPORT)

        layout = container.find_slot(Slot.LAYOUT)
        target = layout if layout is not None else container
        target.region(Slot.REPORT).set_inner_html(markup)
        logger.debug(f"Rendered {len(items)} report descriptor(s)")
        return container

    async def render(self, payloads: Sequence[Any]) -> Html:
        """ Runs every phase and returns the markup for all items regardless of slot, without touching a container. """
        return self.to_html(await self._prepare(payloads))

    def resolve_strategy(self, payload: Any) -> DescriptorStrategy:
        """ Looks up the strategy by the payload's own `type` field. Raises UnsupportedTypeError if there is none. """
        type_ = None
        if isinstance(payload, Mapping):
            type_ = payload.get("type")
        elif isinstance(payload, pydantic.BaseModel):
            type_ = getattr(payload, "type", None)
        if not isinstance(type_, str):
            raise UnsupportedTypeError(None)

        strategy = self.registry.get(type_)
        if strategy is None:
            raise UnsupportedTypeError(type_)
        return strategy

    async def _prepare(self, payloads: Sequence[Any]) -> list[DescriptorItem]:
        """ Phases 1 to 3. """
        await self.ensure_components(payloads)
        validated = self.validate(payloads)
        return self.build_descriptors(validated)

    @staticmethod
    def _as_list(payloads: Any) -> list[Any]:
        if not isinstance(payloads, (list, tuple)):
            raise ValidationError(
                f"Expected a list of payloads, got {type(payloads).__name__}.",
                [ValidationIssue(path=(), message="Input should be a valid list", code="list_type")],
            )
        return list(payloads)
