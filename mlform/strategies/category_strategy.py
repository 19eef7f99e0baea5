from .field_types import FieldTypes
from .schemas import CategoryField
from ..descriptors.loaders import load_component
from ..extensions.field_strategy import Control, FieldStrategy


class CategoryStrategy(FieldStrategy[CategoryField]):
    def __init__(self) -> None:
        super().__init__(FieldTypes.CATEGORY, CategoryField, load_component("mlform.frontend.components.category_field"))

    def build_control(self, field: CategoryField) -> Control:
        return Control("category-field", {
            "defaultValue": field.value or "",
            "optionList": field.options,
        })
