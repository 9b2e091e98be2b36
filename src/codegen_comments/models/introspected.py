"""Table and column metadata as supplied by database introspection"""

import re
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class FullyQualifiedTable:
    """catalog.schema.table, skipping the parts that are empty"""
    table: str
    schema: Optional[str] = None
    catalog: Optional[str] = None

    def __str__(self) -> str:
        parts = [part for part in (self.catalog, self.schema, self.table) if part]
        return ".".join(parts)

    @classmethod
    def parse(cls, name: str) -> 'FullyQualifiedTable':
        """Build from a dotted name such as 'schema.table'"""
        parts = name.split(".")
        if len(parts) >= 3:
            return cls(table=".".join(parts[2:]), schema=parts[1], catalog=parts[0])
        if len(parts) == 2:
            return cls(table=parts[1], schema=parts[0])
        return cls(table=name)


@dataclass
class IntrospectedColumn:
    """A column of an introspected table"""
    actual_column_name: str
    remarks: Optional[str] = None
    java_type: str = "String"
    java_property: str = ""

    def __post_init__(self):
        if not self.java_property:
            self.java_property = to_camel_case(self.actual_column_name)


@dataclass
class IntrospectedTable:
    """A table with the columns the generator will map"""
    fully_qualified_table: FullyQualifiedTable
    remarks: Optional[str] = None
    columns: List[IntrospectedColumn] = field(default_factory=list)

    def get_fully_qualified_table(self) -> str:
        return str(self.fully_qualified_table)

    @property
    def domain_object_name(self) -> str:
        """Java class name for the table: order_line -> OrderLine"""
        name = to_camel_case(self.fully_qualified_table.table)
        return name[:1].upper() + name[1:]


def to_camel_case(name: str) -> str:
    """Database identifier to Java property name: first_name -> firstName"""
    words = [word for word in re.split(r"[^0-9A-Za-z]+", name) if word]
    if not words:
        return name
    if len(words) == 1 and not name.isupper():
        return words[0][:1].lower() + words[0][1:]
    head = words[0].lower()
    return head + "".join(word[:1].upper() + word[1:].lower() for word in words[1:])
