from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, get_args, get_origin

import pydantic

from .descriptor_item import DescriptorItem
from .loaders import Loader
from ..utilities.result import ParseResult
from ..utilities.setup_error import EmptyTypeError, SetupError
from ..utilities.validation_error import ValidationError

M = TypeVar('M', bound=pydantic.BaseModel)


@dataclass(frozen=True, eq=False)
class DescriptorStrategy(ABC, Generic[M]):
    """ Binds a type tag to a payload schema, a loader for the component that renders it, and a descriptor builder.

    Instances are frozen: assigning to any attribute after construction raises dataclasses.FrozenInstanceError.
    Concrete strategies pass their tag, schema and loader up through __init__ and implement build_descriptor().

    The schema must be a pydantic model declaring a `type` field whose Literal includes the strategy's tag, since registries
    discriminate payloads on that field. """

    type: str
    schema: type[M]
    loader: Loader = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.type, str) or not self.type.strip():
            raise EmptyTypeError(self.type)
        # Enum tags are stored by value
        object.__setattr__(self, "type", str(self.type))
        if not (isinstance(self.schema, type) and issubclass(self.schema, pydantic.BaseModel)):
            raise SetupError(f"Schema for type '{self.type}' must be a pydantic model class, got {self.schema!r}.")
        type_field = self.schema.model_fields.get("type")
        if type_field is None:
            raise SetupError(f"Schema {self.schema.__name__} must declare a 'type' field.")
        if get_origin(type_field.annotation) is not Literal or self.type not in get_args(type_field.annotation):
            raise SetupError(f"Schema {self.schema.__name__} must annotate 'type' as Literal['{self.type}'].")
        if not callable(self.loader):
            raise SetupError(f"Loader for type '{self.type}' must be callable.")

    def validate(self, payload: Any) -> bool:
        """ Returns True iff payload conforms to the schema. Never raises. """
        try:
            self.schema.model_validate(payload)
        except pydantic.ValidationError:
            return False
        return True

    def parse(self, payload: Any) -> M:
        """ Returns the validated payload. Raises ValidationError with one issue per failed constraint. """
        try:
            return self.schema.model_validate(payload)
        except pydantic.ValidationError as e:
            raise ValidationError.from_pydantic(e) from e

    def safe_parse(self, payload: Any) -> ParseResult:
        try:
            return ParseResult(success=True, data=self.parse(payload))
        except ValidationError as e:
            return ParseResult(success=False, error=e)

    @abstractmethod
    def build_descriptor(self, payload: M) -> DescriptorItem:
        """ Pure function of an already validated payload. Returns the root of that payload's subtree. """
        raise NotImplementedError
