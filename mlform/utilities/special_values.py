LAYOUT_TAG = "ml-layout"
"""
The element that every mounted form is drawn inside of. Its regions are addressed by slot name.
"""

FIELD_WRAPPER_TAG = "field-wrapper"
"""
The labeled container that FieldStrategies wrap their controls with.
"""

BASELINE_COMPONENTS = (
    "mlform.frontend.components.ml_layout",
    "mlform.frontend.components.field_wrapper",
)
"""
Component modules that every ensure-components batch imports, regardless of which payload types are present.
Re-importing a module that is already in sys.modules is a no-op.
"""
