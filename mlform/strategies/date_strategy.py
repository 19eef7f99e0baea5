from datetime import datetime, timezone

from .field_types import FieldTypes
from .schemas import DateField
from ..descriptors.loaders import load_component
from ..extensions.field_strategy import Control, FieldStrategy


def to_iso_string(value: datetime | None) -> str | None:
    """ UTC with millisecond precision and a Z suffix, e.g. 2025-01-31T09:30:00.000Z """
    if value is None:
        return None
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class DateStrategy(FieldStrategy[DateField]):
    def __init__(self) -> None:
        super().__init__(FieldTypes.DATE, DateField, load_component("mlform.frontend.components.date_field"))

    def build_control(self, field: DateField) -> Control:
        return Control("date-field", {
            "min": to_iso_string(field.min),
            "max": to_iso_string(field.max),
            "step": field.step,
            "defaultValue": to_iso_string(field.value),
        })
