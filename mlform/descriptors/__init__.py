"""
Descriptor core: strategies, the registry that combines their schemas, and the service that turns payloads into markup.
"""

from .descriptor_item import DescriptorItem, Slot
from .loaders import Loader, load_component
from .descriptor_strategy import DescriptorStrategy
from .descriptor_registry import DescriptorRegistry
from .descriptor_service import DescriptorService
