from collections.abc import Iterable
from typing import Annotated, Any, Union

from bidict import bidict
from pydantic import Field, TypeAdapter
import pydantic

from .descriptor_strategy import DescriptorStrategy
from ..utilities.logger import logger
from ..utilities.setup_error import DuplicateTypeError, SetupError, TypeNotFoundError
from ..utilities.validation_error import ValidationError

EMPTY_LIST_TYPE = Annotated[list[Any], Field(max_length=0)]
""" Combined type of a registry with no strategies: only an empty list validates. """


class DescriptorRegistry:
    """ A catalog of strategies keyed by type tag, plus a combined schema over every registered payload shape.

    The combined schema is rebuilt synchronously on every mutation. A mutation whose combined schema cannot be built
    raises SetupError and leaves the registry as it was. Registration is a setup-time operation, so the rebuild cost
    (proportional to the catalog size) is never paid on the render path. """

    def __init__(self, strategies: Iterable[DescriptorStrategy] = ()):
        self._catalog: bidict[str, DescriptorStrategy] = bidict()
        self._list_type: Any = EMPTY_LIST_TYPE
        self._schema: TypeAdapter = TypeAdapter(EMPTY_LIST_TYPE)
        for strategy in strategies:
            self.register(strategy)

    def __contains__(self, type_: object) -> bool:
        return type_ in self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    @property
    def schema(self) -> TypeAdapter:
        """ Validator for a list in which every element matches one registered shape. Dispatches on each element's `type` field. """
        return self._schema

    @property
    def list_type(self) -> Any:
        """ The annotation the combined schema was built from. Useful to embed the combined shape in a larger model. """
        return self._list_type

    @property
    def types(self) -> list[str]:
        return list(self._catalog.keys())

    def register(self, strategy: DescriptorStrategy) -> None:
        """ Raises DuplicateTypeError if strategy.type is already registered, and SetupError if its schema
        cannot join the combined schema. The registry is unchanged when either is raised. """
        if strategy.type in self._catalog:
            raise DuplicateTypeError(strategy.type)
        catalog = self._catalog.copy()
        catalog[strategy.type] = strategy
        self._commit(catalog)
        logger.debug(f"Registered strategy '{strategy.type}' ({type(strategy).__name__})")

    def unregister(self, type_: str) -> None:
        """ Raises TypeNotFoundError if type_ is not registered. """
        if type_ not in self._catalog:
            raise TypeNotFoundError(type_)
        catalog = self._catalog.copy()
        del catalog[type_]
        self._commit(catalog)
        logger.debug(f"Unregistered strategy '{type_}'")

    def update(self, strategy: DescriptorStrategy) -> None:
        """ Replaces the strategy registered under strategy.type, even if the new schema has a different shape.
        Raises TypeNotFoundError if strategy.type is not registered, and SetupError if the new schema cannot join
        the combined schema. """
        if strategy.type not in self._catalog:
            raise TypeNotFoundError(strategy.type)
        catalog = self._catalog.copy()
        catalog.forceput(strategy.type, strategy)
        self._commit(catalog)
        logger.debug(f"Updated strategy '{strategy.type}' ({type(strategy).__name__})")

    def get(self, type_: str) -> DescriptorStrategy | None:
        """ Returns None if no strategy is registered under type_. """
        return self._catalog.get(type_)

    def type_of(self, strategy: DescriptorStrategy) -> str | None:
        """ Return the tag this exact strategy instance is registered under. """
        return self._catalog.inverse.get(strategy)

    def validate(self, payloads: Any) -> list[pydantic.BaseModel]:
        """ Parses payloads with the combined schema. Raises ValidationError if any element fails, nothing is returned partially. """
        try:
            return self._schema.validate_python(payloads)
        except pydantic.ValidationError as e:
            raise ValidationError.from_pydantic(e) from e

    def json_schema(self) -> dict[str, Any]:
        return self._schema.json_schema()

    def _commit(self, catalog: bidict[str, DescriptorStrategy]) -> None:
        """ Builds the combined schema for catalog and only then swaps catalog and schema in together. """
        list_type = self._build_list_type(catalog.values())
        try:
            schema = TypeAdapter(list_type)
        except TypeError as e:
            # e.g. two member models claiming the same `type` literal
            raise SetupError(f"Cannot build the combined schema for types {list(catalog)}: {e}") from e
        self._catalog = catalog
        self._list_type = list_type
        self._schema = schema

    @staticmethod
    def _build_list_type(strategies: Iterable[DescriptorStrategy]) -> Any:
        """ The union's member list comes from the catalog values. """
        # A model may back more than one tag, so members are deduplicated
        models = list(dict.fromkeys(strategy.schema for strategy in strategies))
        if not models:
            return EMPTY_LIST_TYPE
        if len(models) == 1:
            return list[models[0]]
        return list[Annotated[Union[tuple(models)], Field(discriminator="type")]]
