from .field_types import FieldTypes
from .schemas import TextField
from ..descriptors.loaders import load_component
from ..extensions.field_strategy import Control, FieldStrategy


class TextStrategy(FieldStrategy[TextField]):
    def __init__(self) -> None:
        super().__init__(FieldTypes.TEXT, TextField, load_component("mlform.frontend.components.text_field"))

    def build_control(self, field: TextField) -> Control:
        return Control("text-field", {
            "minlength": field.minLength,
            "maxlength": field.maxLength,
            "placeholder": field.placeholder,
            "defaultValue": field.value,
            "pattern": field.pattern,
        })
