"""
The hooks a code generator calls while it emits Java and XML artifacts.

A generator holds one CommentGenerator for a whole generation pass. It
configures it once with the user's properties, then calls the matching hook
each time it creates an artifact that may carry a comment.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from ..models.introspected import IntrospectedColumn, IntrospectedTable
from ..models.java_element import Field, InnerClass, InnerEnum, JavaElement, Method, TopLevelClass
from ..models.xml_element import XmlElement


class CommentGenerator(ABC):
    """Capability interface implemented by comment generators"""

    @abstractmethod
    def configure(self, properties: Mapping[str, str]) -> None:
        """Merge configuration properties; called before any other hook"""

    @abstractmethod
    def annotate_file_header(self, compilation_unit: TopLevelClass) -> None:
        """Comment at the top of a generated Java file"""

    @abstractmethod
    def annotate_class(self, inner_class: InnerClass, introspected_table: IntrospectedTable,
                       mark_as_do_not_delete: bool = False) -> None:
        """Comment on a generated inner class"""

    @abstractmethod
    def annotate_model_class(self, top_level_class: TopLevelClass,
                             introspected_table: IntrospectedTable) -> None:
        """Comment on the model class generated for a table"""

    @abstractmethod
    def annotate_enum(self, inner_enum: InnerEnum, introspected_table: IntrospectedTable) -> None:
        """Comment on a generated inner enum"""

    @abstractmethod
    def annotate_field(self, field: Field, introspected_table: IntrospectedTable,
                       introspected_column: Optional[IntrospectedColumn] = None) -> None:
        """Comment on a field; with a column, on the field mapped to it"""

    @abstractmethod
    def annotate_general_method(self, method: Method, introspected_table: IntrospectedTable) -> None:
        """Comment on a generated method that is not a getter or setter"""

    @abstractmethod
    def annotate_getter(self, method: Method, introspected_table: IntrospectedTable,
                        introspected_column: IntrospectedColumn) -> None:
        """Comment on the getter of a column property"""

    @abstractmethod
    def annotate_setter(self, method: Method, introspected_table: IntrospectedTable,
                        introspected_column: IntrospectedColumn) -> None:
        """Comment on the setter of a column property"""

    @abstractmethod
    def annotate_generated_xml_comment(self, xml_element: XmlElement) -> None:
        """Comment marking a generated XML element"""

    @abstractmethod
    def annotate_xml_root(self, root_element: XmlElement) -> None:
        """Comment on the root element of a generated XML document"""

    def annotate_generated_marker(self, java_element: JavaElement,
                                  mark_as_do_not_delete: bool = False) -> None:
        """Tag an element as generator-owned for merge tooling; optional"""
