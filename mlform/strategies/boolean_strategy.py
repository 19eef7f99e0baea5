from .field_types import FieldTypes
from .schemas import BooleanField
from ..descriptors.loaders import load_component
from ..extensions.field_strategy import Control, FieldStrategy


class BooleanStrategy(FieldStrategy[BooleanField]):
    def __init__(self) -> None:
        super().__init__(FieldTypes.BOOLEAN, BooleanField, load_component("mlform.frontend.components.boolean_field"))

    def build_control(self, field: BooleanField) -> Control:
        # Passed as a string so that false survives as "false" instead of dropping the attribute
        default_value = None if field.value is None else str(field.value).lower()
        return Control("boolean-field", {"defaultValue": default_value})
