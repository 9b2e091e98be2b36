"""
Pytest configuration and fixtures for codegen-comments tests.
"""

from datetime import datetime, timezone

import pytest

from codegen_comments.commenter import CommentAnnotator
from codegen_comments.models import FullyQualifiedTable, IntrospectedColumn, IntrospectedTable

FIXED_MOMENT = datetime(2016, 3, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """A clock stopped at 2016-03-01T00:00:00 UTC."""
    return lambda: FIXED_MOMENT


@pytest.fixture
def annotator(fixed_clock):
    """An unconfigured annotator on the fixed clock."""
    return CommentAnnotator(clock=fixed_clock)


@pytest.fixture
def table():
    """Table foo.bar without remarks."""
    return IntrospectedTable(fully_qualified_table=FullyQualifiedTable(table="bar", schema="foo"))


@pytest.fixture
def column():
    """Column baz without remarks."""
    return IntrospectedColumn(actual_column_name="baz")


@pytest.fixture
def tables_file(tmp_path):
    """A tables description for the preview CLI."""
    content = """tables:
  - name: foo.bar
    remarks: Bars of foo
    columns:
      - name: baz
        type: String
        remarks: The baz
      - name: item_count
        type: Integer
"""
    path = tmp_path / "tables.yaml"
    path.write_text(content)
    return path
