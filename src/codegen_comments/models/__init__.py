from .introspected import FullyQualifiedTable, IntrospectedColumn, IntrospectedTable
from .java_element import Field, InnerClass, InnerEnum, JavaElement, Method, TopLevelClass, Visibility
from .xml_element import TextElement, XmlElement

__all__ = [
    "FullyQualifiedTable",
    "IntrospectedColumn",
    "IntrospectedTable",
    "Field",
    "InnerClass",
    "InnerEnum",
    "JavaElement",
    "Method",
    "TopLevelClass",
    "Visibility",
    "TextElement",
    "XmlElement",
]
