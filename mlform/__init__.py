"""
MLForm

Registers field and report strategies under type tags, validates lists of tagged payloads against the union of every
registered shape and renders them into markup inside a mount point.
"""

__version__ = "0.1.0"

from .descriptors import DescriptorItem, DescriptorRegistry, DescriptorService, DescriptorStrategy, Loader, Slot, load_component
from .extensions import BaseField, BaseReport, Control, FieldStrategy, ReportStrategy
from .frontend.framework.custom_elements import custom_elements
from .frontend.framework.html_attr import HtmlAttr
from .frontend.framework.mount_point import MountPoint
from .frontend.framework.serialize import serialize_descriptor, serialize_descriptors
from .frontend.utilities.html import Html
from .mlform import MLForm
from .utilities.logger import set_log_level, set_logger
from .utilities.result import ParseResult
from .utilities.setup_error import DuplicateTypeError, EmptyTypeError, SetupError, TypeNotFoundError
from .utilities.unsupported_type_error import UnsupportedTypeError
from .utilities.validation_error import ValidationError, ValidationIssue
