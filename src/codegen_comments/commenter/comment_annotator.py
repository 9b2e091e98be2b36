"""
Default comment generator for table-driven Java code.

Comments name the table (and column) an artifact was generated from and carry
the database remarks when there are any. With ``suppressAllComments`` nothing
is written at all.
"""

import logging
from typing import Dict, List, Mapping, Optional

from ..models.introspected import IntrospectedColumn, IntrospectedTable
from ..models.java_element import Field, InnerClass, InnerEnum, JavaElement, Method, TopLevelClass
from ..models.xml_element import XmlElement
from ..utils.config import AnnotatorConfig, merge_properties
from ..utils.date_format import DEFAULT_DATE_FORMAT, Clock, system_clock
from .base import CommentGenerator

logger = logging.getLogger(__name__)


class MergeConstants:
    """Tokens the merge tooling looks for; they must not change"""

    NEW_ELEMENT_TAG = "@mbg.generated"
    DO_NOT_DELETE_TAG = "do_not_delete_during_merge"


class CommentAnnotator(CommentGenerator):
    """Adds table and column comments to generated Java artifacts"""

    def __init__(self, clock: Clock = system_clock, line_separator: str = "\n"):
        self.clock = clock
        self.line_separator = line_separator
        self.properties: Dict[str, str] = {}
        self.config = AnnotatorConfig()

    @property
    def suppress_all_comments(self) -> bool:
        return self.config.suppress_all_comments

    @property
    def suppress_date(self) -> bool:
        return self.config.suppress_date

    def configure(self, properties: Mapping[str, str]) -> None:
        """
        Merge properties into the current configuration.

        Nothing changes if the merged properties are invalid, so a failed call
        can be followed by a corrected one.

        Raises:
            ConfigurationError: if the date format pattern does not compile
        """
        merged = merge_properties(self.properties, properties)
        config = AnnotatorConfig.from_properties(merged)

        self.properties = merged
        self.config = config
        logger.debug(
            f"Comment generator configured: suppress_all_comments={config.suppress_all_comments}, "
            f"suppress_date={config.suppress_date}, date_format={config.date_format}"
        )

    def format_timestamp(self) -> Optional[str]:
        """
        The timestamp to put in generated-element tags.

        Returns:
            None when dates are suppressed, otherwise the clock's current time
            in the configured pattern or in java.util.Date's long form
        """
        if self.config.suppress_date:
            return None
        date_format = self.config.date_format or DEFAULT_DATE_FORMAT
        return date_format.format(self.clock())

    def annotate_generated_marker(self, java_element: JavaElement,
                                  mark_as_do_not_delete: bool = False) -> None:
        """
        Add the Javadoc tag that marks an element as generated.

        Leaving this tag out breaks merging of regenerated files with edited
        ones.
        """
        if self.config.suppress_all_comments:
            return
        java_element.add_java_doc_line(" *")
        tag = f" * {MergeConstants.NEW_ELEMENT_TAG}"
        if mark_as_do_not_delete:
            tag += f" {MergeConstants.DO_NOT_DELETE_TAG}"
        timestamp = self.format_timestamp()
        if timestamp is not None:
            tag += f" {timestamp}"
        java_element.add_java_doc_line(tag)

    def annotate_file_header(self, compilation_unit: TopLevelClass) -> None:
        # add no file level comments by default
        pass

    def annotate_xml_root(self, root_element: XmlElement) -> None:
        # add no document level comments by default
        pass

    def annotate_generated_xml_comment(self, xml_element: XmlElement) -> None:
        if self.config.suppress_all_comments:
            return
        # No default marker for XML elements; reserved for subclasses

    def annotate_class(self, inner_class: InnerClass, introspected_table: IntrospectedTable,
                       mark_as_do_not_delete: bool = False) -> None:
        self._add_table_comment(inner_class, introspected_table)

    def annotate_enum(self, inner_enum: InnerEnum, introspected_table: IntrospectedTable) -> None:
        self._add_table_comment(inner_enum, introspected_table)

    def annotate_general_method(self, method: Method, introspected_table: IntrospectedTable) -> None:
        self._add_table_comment(method, introspected_table)

    def annotate_model_class(self, top_level_class: TopLevelClass,
                             introspected_table: IntrospectedTable) -> None:
        if self.config.suppress_all_comments:
            return
        self._add_remarks_comment(
            top_level_class,
            introspected_table.get_fully_qualified_table(),
            introspected_table.remarks,
        )

    def annotate_field(self, field: Field, introspected_table: IntrospectedTable,
                       introspected_column: Optional[IntrospectedColumn] = None) -> None:
        if introspected_column is None:
            self._add_table_comment(field, introspected_table)
        else:
            self._add_column_comment(field, introspected_table, introspected_column)

    def annotate_getter(self, method: Method, introspected_table: IntrospectedTable,
                        introspected_column: IntrospectedColumn) -> None:
        self._add_column_comment(method, introspected_table, introspected_column)

    def annotate_setter(self, method: Method, introspected_table: IntrospectedTable,
                        introspected_column: IntrospectedColumn) -> None:
        self._add_column_comment(method, introspected_table, introspected_column)

    def split_remarks(self, remarks: Optional[str]) -> List[str]:
        """Remark lines; trailing empty lines are dropped"""
        if not remarks:
            return []
        lines = remarks.split(self.line_separator)
        while lines and not lines[-1]:
            lines.pop()
        return lines

    def _add_table_comment(self, java_element: JavaElement,
                           introspected_table: IntrospectedTable) -> None:
        if self.config.suppress_all_comments:
            return
        java_element.add_java_doc_line(f"/** {introspected_table.get_fully_qualified_table()} */")

    def _add_column_comment(self, java_element: JavaElement, introspected_table: IntrospectedTable,
                            introspected_column: IntrospectedColumn) -> None:
        if self.config.suppress_all_comments:
            return
        subject = (f"{introspected_table.get_fully_qualified_table()}"
                   f".{introspected_column.actual_column_name}")
        self._add_remarks_comment(java_element, subject, introspected_column.remarks)

    def _add_remarks_comment(self, java_element: JavaElement, subject: str,
                             remarks: Optional[str]) -> None:
        remark_lines = self.split_remarks(remarks)

        if not remark_lines:
            java_element.add_java_doc_line(f"/** {subject} */")
        elif len(remark_lines) == 1:
            java_element.add_java_doc_line(f"/** {subject} {remark_lines[0]} */")
        else:
            java_element.add_java_doc_line(f"/** {subject}")
            for line in remark_lines:
                java_element.add_java_doc_line(f"*  {line}")
            java_element.add_java_doc_line("*/")
