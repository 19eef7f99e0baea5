import pytest

from mlform import DescriptorRegistry, DescriptorService, MountPoint, Slot, ValidationError, custom_elements, serialize_descriptor
from mlform.descriptors import load_component
from mlform.strategies import (
    BooleanStrategy,
    CategoryStrategy,
    ClassifierStrategy,
    DateStrategy,
    NumberStrategy,
    RegressorStrategy,
    TextStrategy,
    default_strategies,
)
from mlform.strategies import schemas
from mlform.utilities.special_values import BASELINE_COMPONENTS


def build(strategy, payload):
    return strategy.build_descriptor(strategy.parse(payload))


def messages(exc_info) -> str:
    return " | ".join(issue.message for issue in exc_info.value.issues)


class TestFieldStrategies:

    def test_field_is_wrapped(self) -> None:
        item = build(TextStrategy(), {"type": "text", "title": "Name", "description": "Full name"})
        assert item.tag == "field-wrapper"
        assert item.slot == Slot.INPUTS
        assert item.child.slot == Slot.INPUTS
        assert serialize_descriptor(item) == (
            '<field-wrapper title="Name" description="Full name"><text-field></text-field></field-wrapper>'
        )

    def test_missing_description_renders_empty(self) -> None:
        item = build(BooleanStrategy(), {"type": "boolean", "title": "Smoker"})
        assert item.props == {"title": "Smoker", "description": ""}

    @pytest.mark.parametrize("title", ["", "A", " Age", "Age ", "x" * 101])
    def test_title_constraints(self, title) -> None:
        with pytest.raises(ValidationError):
            TextStrategy().parse({"type": "text", "title": title})

    def test_unknown_keys_are_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TextStrategy().parse({"type": "text", "title": "Name", "colour": "red"})
        assert exc_info.value.issues[0].path == ("colour",)

    def test_number_field(self) -> None:
        item = build(NumberStrategy(), {"type": "number", "title": "Age", "min": 0, "max": 120, "value": 30})
        assert serialize_descriptor(item.child) == '<number-field min="0" max="120" step="1" defaultValue="30"></number-field>'

    def test_optional_bounded_number_is_a_range(self) -> None:
        item = build(NumberStrategy(), {
            "type": "number", "title": "Weight", "min": 0, "max": 10, "value": 2.5, "step": 0.5,
            "unit": "kg", "required": False,
        })
        assert item.child.tag == "range-field"
        assert item.child.props == {"unit": "kg", "min": 0, "max": 10, "step": 0.5, "defaultValue": 2.5}

    @pytest.mark.parametrize("payload, message", [
        ({"min": 5, "max": 1}, schemas.NUMBER_MIN_MAX_MESSAGE),
        ({"min": 5, "value": 1}, schemas.NUMBER_VALUE_MIN_MESSAGE),
        ({"max": 5, "value": 10}, schemas.NUMBER_VALUE_MAX_MESSAGE),
    ])
    def test_number_bounds(self, payload, message) -> None:
        with pytest.raises(ValidationError) as exc_info:
            NumberStrategy().parse({"type": "number", "title": "Age", **payload})
        assert message in messages(exc_info)

    def test_number_step_must_be_positive(self) -> None:
        assert not NumberStrategy().validate({"type": "number", "title": "Age", "step": 0})

    def test_text_field(self) -> None:
        item = build(TextStrategy(), {
            "type": "text", "title": "Code", "minLength": 2, "maxLength": 4, "pattern": "[A-Z]+", "value": "AB",
        })
        assert item.child.props == {
            "minlength": 2, "maxlength": 4, "placeholder": None, "defaultValue": "AB", "pattern": "[A-Z]+",
        }

    @pytest.mark.parametrize("payload, message", [
        ({"pattern": "["}, schemas.TEXT_PATTERN_MESSAGE),
        ({"minLength": 5, "maxLength": 2}, schemas.TEXT_MIN_MAX_MESSAGE),
        ({"minLength": 3, "value": "ab"}, "Minimum length is 3 characters"),
        ({"maxLength": 1, "value": "ab"}, "Maximum length of 1 characters exceeded."),
    ])
    def test_text_constraints(self, payload, message) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TextStrategy().parse({"type": "text", "title": "Code", **payload})
        assert message in messages(exc_info)

    @pytest.mark.parametrize("value, expected", [(True, "true"), (False, "false"), (None, None)])
    def test_boolean_default_value(self, value, expected) -> None:
        payload = {"type": "boolean", "title": "Smoker"}
        if value is not None:
            payload["value"] = value
        item = build(BooleanStrategy(), payload)
        assert item.child.props == {"defaultValue": expected}

    def test_category_field(self) -> None:
        item = build(CategoryStrategy(), {"type": "category", "title": "Colour", "options": ["red", "blue"], "value": "red"})
        assert serialize_descriptor(item.child) == (
            '<category-field defaultValue="red" optionList="[&quot;red&quot;,&quot;blue&quot;]"></category-field>'
        )

    def test_category_constraints(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            CategoryStrategy().parse({"type": "category", "title": "Colour", "options": ["red"], "value": "green"})
        assert schemas.VALUE_NOT_IN_OPTIONS_MESSAGE in messages(exc_info)

        assert not CategoryStrategy().validate({"type": "category", "title": "Colour", "options": []})

    def test_date_field(self) -> None:
        item = build(DateStrategy(), {
            "type": "date", "title": "Visit",
            "min": "2025-01-01T00:00:00Z", "max": "2025-12-31T23:59:59Z", "value": "2025-01-31T10:30:00+01:00",
        })
        assert item.child.props == {
            "min": "2025-01-01T00:00:00.000Z",
            "max": "2025-12-31T23:59:59.000Z",
            "step": 1,
            "defaultValue": "2025-01-31T09:30:00.000Z",
        }

    def test_date_requires_timezone(self) -> None:
        assert not DateStrategy().validate({"type": "date", "title": "Visit", "value": "2025-01-31T10:30:00"})

    @pytest.mark.parametrize("payload, message", [
        ({"min": "2025-02-01T00:00:00Z", "max": "2025-01-01T00:00:00Z"}, schemas.DATE_MIN_MAX_MESSAGE),
        ({"max": "2025-01-01T00:00:00Z", "value": "2025-02-01T00:00:00Z"}, schemas.DATE_VALUE_MAX_MESSAGE),
        ({"min": "2025-02-01T00:00:00Z", "value": "2025-01-01T00:00:00Z"}, schemas.DATE_VALUE_MIN_MESSAGE),
    ])
    def test_date_bounds(self, payload, message) -> None:
        with pytest.raises(ValidationError) as exc_info:
            DateStrategy().parse({"type": "date", "title": "Visit", **payload})
        assert message in messages(exc_info)


class TestReportStrategies:

    def test_classifier_is_not_wrapped(self) -> None:
        item = build(ClassifierStrategy(), {
            "type": "classifier", "title": "Risk", "mapping": ["low", "high"], "probabilities": [[0.2, 0.8]],
        })
        assert item.slot == Slot.REPORT
        assert item.child is None
        assert serialize_descriptor(item) == (
            '<classifier-prediction title="Risk" mapping="[&quot;low&quot;,&quot;high&quot;]" '
            'probabilities="[[0.2,0.8]]" details="false"></classifier-prediction>'
        )

    def test_classifier_probabilities_are_bounded(self) -> None:
        assert not ClassifierStrategy().validate({"type": "classifier", "probabilities": [[1.5]]})
        assert not ClassifierStrategy().validate({"type": "classifier", "probabilities": [[]]})

    def test_regressor(self) -> None:
        item = build(RegressorStrategy(), {"type": "regressor", "values": [12.5], "unit": "kg", "interval": [10, 15]})
        assert serialize_descriptor(item) == (
            '<regressor-prediction values="[12.5]" unit="kg" interval="[10,15]"></regressor-prediction>'
        )

    def test_report_base_constraints(self) -> None:
        assert not RegressorStrategy().validate({"type": "regressor", "execution_time": -1})
        assert RegressorStrategy().validate({"type": "regressor", "execution_time": 0.25})


@pytest.mark.asyncio
async def test_bundled_strategies_mount_end_to_end() -> None:
    strategies = default_strategies()
    registry = DescriptorRegistry(s for s in strategies if s.type in {"number", "boolean"})
    service = DescriptorService(registry)

    container = await service.mount([
        {"type": "number", "title": "Weight", "min": 0, "max": 10, "value": 2, "required": False},
        {"type": "boolean", "title": "Smoker", "value": False},
    ], MountPoint())

    inputs = container.find_slot(Slot.LAYOUT).find_slot(Slot.INPUTS)
    assert inputs.inner_html == (
        '<field-wrapper title="Weight" description="">'
        '<range-field min="0" max="10" step="1" defaultValue="2"></range-field>'
        '</field-wrapper>'
        '<field-wrapper title="Smoker" description="">'
        '<boolean-field defaultValue="false"></boolean-field>'
        '</field-wrapper>'
    )
    for tag in ("ml-layout", "field-wrapper", "range-field", "number-field", "boolean-field"):
        assert custom_elements.is_defined(tag)


def test_default_strategies_cover_every_type() -> None:
    registry = DescriptorRegistry(default_strategies())
    assert sorted(registry.types) == ["boolean", "category", "classifier", "date", "number", "regressor", "text"]


def walk(item):
    while item is not None:
        yield item
        item = item.child


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"type": "text", "title": "Name", "placeholder": "Jane", "minLength": 1, "maxLength": 5, "pattern": "^J"},
    {"type": "number", "title": "Age", "min": 0, "max": 9, "value": 3, "unit": "y", "placeholder": "3"},
    {"type": "number", "title": "Age", "min": 0, "max": 9, "value": 3, "required": False},
    {"type": "boolean", "title": "Smoker", "value": True},
    {"type": "category", "title": "Color", "options": ["red", "blue"], "value": "red"},
    {"type": "date", "title": "Day", "min": "2024-01-01T00:00:00Z", "value": "2024-02-01T00:00:00Z"},
    {"type": "classifier", "title": "Risk", "mapping": ["low", "high"], "probabilities": [[0.2, 0.8]]},
    {"type": "regressor", "title": "Price", "values": [1.5], "unit": "$", "interval": [1, 2]},
])
async def test_emitted_props_are_observed_by_their_element(payload) -> None:
    strategy = next(s for s in default_strategies() if s.type == payload["type"])
    await load_component(*BASELINE_COMPONENTS)()
    await strategy.loader()

    for node in walk(build(strategy, payload)):
        element = custom_elements.get(node.tag)
        assert element is not None, node.tag
        assert set(node.props) <= set(element.observed_attributes), node.tag
