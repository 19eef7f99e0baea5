from .base_schemas import BaseField, BaseReport
from .field_strategy import Control, FieldStrategy
from .report_strategy import ReportStrategy
