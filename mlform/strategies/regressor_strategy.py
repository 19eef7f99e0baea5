from .field_types import ModelTypes
from .schemas import RegressorModel
from ..descriptors.loaders import load_component
from ..extensions.field_strategy import Control
from ..extensions.report_strategy import ReportStrategy


class RegressorStrategy(ReportStrategy[RegressorModel]):
    def __init__(self) -> None:
        super().__init__(ModelTypes.REGRESSOR, RegressorModel, load_component("mlform.frontend.components.regressor_prediction"))

    def build_control(self, model: RegressorModel) -> Control:
        return Control("regressor-prediction", {
            "title": model.title,
            "values": model.values,
            "unit": model.unit,
            "interval": model.interval,
        })
