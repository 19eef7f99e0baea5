from .field_types import FieldTypes
from .schemas import NumberField
from ..descriptors.loaders import load_component
from ..extensions.field_strategy import Control, FieldStrategy


class NumberStrategy(FieldStrategy[NumberField]):
    """ Optional fields with both bounds and a starting value render as a slider, every other number as a plain input. """

    def __init__(self) -> None:
        super().__init__(
            FieldTypes.NUMBER,
            NumberField,
            load_component("mlform.frontend.components.range_field", "mlform.frontend.components.number_field"),
        )

    def build_control(self, field: NumberField) -> Control:
        is_range = (
            field.min is not None
            and field.max is not None
            and not field.required
            and field.value is not None
        )
        if is_range:
            return Control("range-field", {
                "unit": field.unit,
                "min": field.min,
                "max": field.max,
                "step": field.step,
                "defaultValue": field.value,
            })
        return Control("number-field", {
            "unit": field.unit,
            "min": field.min,
            "max": field.max,
            "step": field.step,
            "defaultValue": field.value,
            "placeholder": field.placeholder,
        })
