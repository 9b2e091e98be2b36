#!/usr/bin/env python3
"""
codegen-comments - preview the comments a generator would write

Reads a YAML description of tables, builds the model class for each one
through the comment generator hooks and prints the resulting Java source.
"""

import sys
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click
import yaml
from dotenv import find_dotenv, load_dotenv

from .commenter.base import CommentGenerator
from .commenter.comment_annotator import CommentAnnotator
from .exceptions import CommentGeneratorError, InputError, JavaSyntaxError
from .models.introspected import FullyQualifiedTable, IntrospectedColumn, IntrospectedTable
from .models.java_element import Field, JavaElement, Method, TopLevelClass, Visibility
from .parser.java_checker import JavaSourceChecker
from .utils.config import PropertyRegistry, load_properties

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Log to stderr so the rendered source on stdout stays clean"""
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    return logging.getLogger(__name__)


def load_tables(tables_path: Path) -> List[IntrospectedTable]:
    """
    Read table descriptions from YAML.

    Expected layout::

        tables:
          - name: shop.order_line
            remarks: One line of an order
            columns:
              - name: quantity
                type: Integer
                remarks: Units ordered
    """
    try:
        with open(tables_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InputError(f"Couldn't read tables file {tables_path}: {e}") from e

    entries = data.get('tables') if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise InputError(f"{tables_path} must have a 'tables' list")

    tables = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get('name'):
            raise InputError(f"Table #{index + 1} in {tables_path} has no name")

        columns = []
        for column in entry.get('columns') or []:
            if not isinstance(column, dict) or not column.get('name'):
                raise InputError(f"Column without a name in table {entry['name']}")
            columns.append(IntrospectedColumn(
                actual_column_name=str(column['name']),
                remarks=_optional_text(column.get('remarks')),
                java_type=str(column.get('type', 'String')),
            ))

        tables.append(IntrospectedTable(
            fully_qualified_table=FullyQualifiedTable.parse(str(entry['name'])),
            remarks=_optional_text(entry.get('remarks')),
            columns=columns,
        ))

    logger.debug(f"Loaded {len(tables)} tables from {tables_path}")
    return tables


class CommentPreview:
    """Builds model classes the way a generator would, calling every hook"""

    def __init__(self, comment_generator: CommentGenerator, package: str = "com.example.model",
                 mark_generated: bool = False):
        self.comment_generator = comment_generator
        self.package = package
        self.mark_generated = mark_generated

    def build_model_class(self, table: IntrospectedTable) -> TopLevelClass:
        top_level_class = TopLevelClass(name=table.domain_object_name, package=self.package)
        self.comment_generator.annotate_file_header(top_level_class)
        if self.mark_generated:
            self._add_generated_header(top_level_class)
        self.comment_generator.annotate_model_class(top_level_class, table)

        for column in table.columns:
            top_level_class.add_field(self._build_field(table, column))

        for column in table.columns:
            top_level_class.add_method(self._build_getter(table, column))
            top_level_class.add_method(self._build_setter(table, column))

        top_level_class.add_method(self._build_to_string(table))
        return top_level_class

    def render(self, tables: List[IntrospectedTable]) -> List[Tuple[str, str]]:
        """(class name, Java source) for each table"""
        rendered = []
        for table in tables:
            model_class = self.build_model_class(table)
            rendered.append((model_class.name, model_class.get_formatted_source()))
        return rendered

    def _add_generated_header(self, top_level_class: TopLevelClass) -> None:
        header = JavaElement(name=top_level_class.name)
        self.comment_generator.annotate_generated_marker(header, mark_as_do_not_delete=True)
        if not header.java_doc_lines:
            return
        # The marker lines continue a block comment, so open and close it here
        for line in ["/**"] + header.java_doc_lines + [" */"]:
            top_level_class.add_file_comment_line(line)

    def _build_field(self, table, column) -> Field:
        field = Field(name=column.java_property, visibility=Visibility.PRIVATE, type=column.java_type)
        self.comment_generator.annotate_field(field, table, column)
        return field

    def _build_getter(self, table, column) -> Method:
        method = Method(
            name=f"get{_capitalize(column.java_property)}",
            return_type=column.java_type,
            body_lines=[f"return {column.java_property};"],
        )
        self.comment_generator.annotate_getter(method, table, column)
        return method

    def _build_setter(self, table, column) -> Method:
        prop = column.java_property
        method = Method(
            name=f"set{_capitalize(prop)}",
            parameters=[(column.java_type, prop)],
            body_lines=[f"this.{prop} = {prop};"],
        )
        self.comment_generator.annotate_setter(method, table, column)
        return method

    def _build_to_string(self, table) -> Method:
        parts = " + \", \" + ".join(
            f"\"{column.java_property}=\" + {column.java_property}" for column in table.columns
        ) or "\"\""
        method = Method(
            name="toString",
            return_type="String",
            body_lines=[f"return \"{table.domain_object_name} [\" + {parts} + \"]\";"],
        )
        self.comment_generator.annotate_general_method(method, table)
        return method


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def _optional_text(value) -> Optional[str]:
    return None if value is None else str(value)


@click.command()
@click.argument('tables_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='YAML file with comment generator properties')
@click.option('--output', '-o', 'output_dir', type=click.Path(file_okay=False, path_type=Path),
              help='Write one .java file per table here instead of printing')
@click.option('--package', default='com.example.model', show_default=True,
              help='Package of the generated model classes')
@click.option('--suppress-date', is_flag=True, help='Leave timestamps out of generated tags')
@click.option('--suppress-all-comments', is_flag=True, help='Generate no comments at all')
@click.option('--date-format', help='SimpleDateFormat pattern for timestamps, e.g. yyyy-MM-dd')
@click.option('--mark-generated', is_flag=True, help='Stamp each file with the @mbg.generated merge marker')
@click.option('--check', is_flag=True, help='Fail if a generated class does not parse as Java')
@click.option('--verbose', '-v', is_flag=True, help='Show debug output')
def main(tables_file, config_file, output_dir, package, suppress_date, suppress_all_comments,
         date_format, mark_generated, check, verbose):
    """
    Preview generated comments for the tables described in TABLES_FILE.

    Properties come from --config, then CODEGEN_COMMENTS_* environment
    variables (a .env file in the working directory is honoured), then the
    command line options.

    Examples:
      codegen-comments tables.yaml
      codegen-comments tables.yaml --config generator.yaml --mark-generated --check -o ./model
    """
    setup_logging(verbose)
    load_dotenv(find_dotenv(usecwd=True))

    overrides = {}
    if suppress_date:
        overrides[PropertyRegistry.COMMENT_GENERATOR_SUPPRESS_DATE] = "true"
    if suppress_all_comments:
        overrides[PropertyRegistry.COMMENT_GENERATOR_SUPPRESS_ALL_COMMENTS] = "true"
    if date_format:
        overrides[PropertyRegistry.COMMENT_GENERATOR_DATE_FORMAT] = date_format

    try:
        annotator = CommentAnnotator()
        annotator.configure(load_properties(config_file))
        if overrides:
            annotator.configure(overrides)

        tables = load_tables(tables_file)
        rendered = CommentPreview(annotator, package, mark_generated).render(tables)

        if check:
            checker = JavaSourceChecker()
            for class_name, source in rendered:
                try:
                    checker.require_valid(source)
                except JavaSyntaxError as e:
                    logger.error(f"{class_name} does not parse: {e}")
                    sys.exit(1)
    except CommentGeneratorError as e:
        logger.error(str(e))
        sys.exit(1)

    if output_dir:
        write_sources(rendered, output_dir)
    else:
        click.echo("\n".join(source for _, source in rendered), nl=False)


def write_sources(rendered: List[Tuple[str, str]], output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    for class_name, source in rendered:
        output_file = output_dir / f"{class_name}.java"
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(source)
        logger.info(f"Wrote {output_file}")


if __name__ == '__main__':
    main()
