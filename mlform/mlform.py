from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, create_model
import pydantic

from .descriptors.descriptor_service import DescriptorService
from .descriptors.descriptor_strategy import DescriptorStrategy
from .extensions.field_strategy import FieldStrategy
from .extensions.report_strategy import ReportStrategy
from .frontend.framework.mount_point import MountPoint
from .utilities.logger import logger
from .utilities.result import ParseResult
from .utilities.setup_error import SetupError
from .utilities.validation_error import ValidationError, ValidationIssue

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


class MLForm:
    """ Entry point that pairs a field service (inputs) with a report service (model outputs).

    A signature is a mapping with an `inputs` list of field payloads and an optional `outputs` list of report payloads.
    Strategies are routed to the matching service by their shape: FieldStrategy or ReportStrategy. """

    def __init__(self) -> None:
        self.field_service = DescriptorService()
        self.report_service = DescriptorService()
        self._outputs: list[Any] = []

    def _service_for(self, strategy: DescriptorStrategy) -> DescriptorService:
        if isinstance(strategy, FieldStrategy):
            return self.field_service
        if isinstance(strategy, ReportStrategy):
            return self.report_service
        raise SetupError(f"{type(strategy).__name__} must be a FieldStrategy or a ReportStrategy.")

    def register(self, strategy: DescriptorStrategy) -> None:
        self._service_for(strategy).registry.register(strategy)

    def update(self, strategy: DescriptorStrategy) -> None:
        self._service_for(strategy).registry.update(strategy)

    def unregister(self, strategy: DescriptorStrategy) -> None:
        self._service_for(strategy).registry.unregister(strategy.type)

    @property
    def outputs(self) -> list[Any]:
        """ Report payloads kept from the last signature passed to to_html(). """
        return list(self._outputs)

    async def to_html(self, signature: Mapping[str, Any], container: MountPoint) -> MountPoint:
        """ Validates the signature's inputs, keeps its outputs for render_report() and mounts the inputs into container. """
        inputs = self._inputs_of(signature)
        self.field_service.registry.validate(inputs)
        self._outputs = list(signature.get("outputs") or [])
        logger.debug(f"Mounting form with {len(inputs)} input(s) and {len(self._outputs)} pending output(s)")
        return await self.field_service.mount(inputs, container)

    async def render_report(self, container: MountPoint, outputs: list[Any] | None = None) -> MountPoint:
        """ Renders outputs, or the outputs kept by to_html(), into the report region of container. """
        payloads = self._outputs if outputs is None else outputs
        return await self.report_service.render_report(payloads, container)

    def validate_schema(self, signature: Any) -> ParseResult:
        """ Checks a signature's inputs the way to_html() does, without raising. Other keys, outputs included, are not checked. """
        try:
            parsed = self.field_service.registry.validate(self._inputs_of(signature))
        except ValidationError as e:
            return ParseResult(success=False, error=e)
        return ParseResult(success=True, data=parsed)

    def schema(self) -> dict[str, Any]:
        """ JSON Schema of a signature accepted by the currently registered strategies. Keys other than inputs and outputs are not allowed. """
        output = {"$schema": JSON_SCHEMA_DIALECT}
        output.update(self._signature_adapter().json_schema())
        return output

    def _signature_adapter(self) -> pydantic.TypeAdapter:
        signature_model = create_model(
            "Signature",
            __config__=ConfigDict(extra="forbid"),
            inputs=(self.field_service.registry.list_type, ...),
            outputs=(self.report_service.registry.list_type | None, None),
        )
        return pydantic.TypeAdapter(signature_model)

    @staticmethod
    def _inputs_of(signature: Mapping[str, Any]) -> Any:
        if not isinstance(signature, Mapping) or "inputs" not in signature:
            raise ValidationError(
                "Signature must be a mapping with an 'inputs' list.",
                [ValidationIssue(path=("inputs",), message="Field required", code="missing")],
            )
        return signature["inputs"]
