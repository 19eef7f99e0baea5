from .field_types import ModelTypes
from .schemas import ClassifierModel
from ..descriptors.loaders import load_component
from ..extensions.field_strategy import Control
from ..extensions.report_strategy import ReportStrategy


class ClassifierStrategy(ReportStrategy[ClassifierModel]):
    def __init__(self) -> None:
        super().__init__(ModelTypes.CLASSIFIER, ClassifierModel, load_component("mlform.frontend.components.classifier_prediction"))

    def build_control(self, model: ClassifierModel) -> Control:
        return Control("classifier-prediction", {
            "title": model.title,
            "mapping": model.mapping,
            "probabilities": model.probabilities,
            "details": str(model.details).lower(),
        })
