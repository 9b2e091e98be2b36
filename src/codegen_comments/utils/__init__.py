from .config import AnnotatorConfig, PropertyRegistry, is_true, load_properties, merge_properties
from .date_format import JavaDateFormat, system_clock

__all__ = [
    "AnnotatorConfig",
    "PropertyRegistry",
    "is_true",
    "load_properties",
    "merge_properties",
    "JavaDateFormat",
    "system_clock",
]
