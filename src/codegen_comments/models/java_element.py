"""Java source artifacts the comment generator writes into"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

INDENT = "    "


class Visibility(Enum):
    """Visibility modifiers"""
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"
    PACKAGE_PRIVATE = ""


def _declaration(*parts: str) -> str:
    return " ".join(part for part in parts if part)


@dataclass
class JavaElement:
    """Anything that can carry Javadoc lines"""
    name: str
    visibility: Visibility = Visibility.PUBLIC
    java_doc_lines: List[str] = field(default_factory=list)
    is_static: bool = False
    is_final: bool = False

    def add_java_doc_line(self, line: str) -> None:
        self.java_doc_lines.append(line)

    def format_java_doc(self, indent: str = "") -> List[str]:
        return [indent + line for line in self.java_doc_lines]

    def _modifiers(self) -> List[str]:
        modifiers = [self.visibility.value]
        if self.is_static:
            modifiers.append("static")
        if self.is_final:
            modifiers.append("final")
        return modifiers


@dataclass
class Field(JavaElement):
    """A field declaration"""
    type: str = "Object"
    initialization_string: Optional[str] = None

    def get_formatted_content(self, indent_level: int = 0) -> List[str]:
        indent = INDENT * indent_level
        declaration = _declaration(*self._modifiers(), self.type, self.name)
        if self.initialization_string:
            declaration += f" = {self.initialization_string}"
        return self.format_java_doc(indent) + [f"{indent}{declaration};"]


@dataclass
class Method(JavaElement):
    """A method; a None return type makes it a constructor"""
    return_type: Optional[str] = "void"
    parameters: List[Tuple[str, str]] = field(default_factory=list)  # (type, name) pairs
    body_lines: List[str] = field(default_factory=list)

    def add_parameter(self, param_type: str, param_name: str) -> None:
        self.parameters.append((param_type, param_name))

    def add_body_line(self, line: str) -> None:
        self.body_lines.append(line)

    def get_formatted_content(self, indent_level: int = 0) -> List[str]:
        indent = INDENT * indent_level
        params = ", ".join(f"{ptype} {pname}" for ptype, pname in self.parameters)
        signature = _declaration(*self._modifiers(), self.return_type or "", f"{self.name}({params})")
        lines = self.format_java_doc(indent)
        lines.append(f"{indent}{signature} {{")
        lines.extend(f"{indent}{INDENT}{line}" for line in self.body_lines)
        lines.append(f"{indent}}}")
        return lines


@dataclass
class InnerEnum(JavaElement):
    """An enum nested in a class"""
    enum_constants: List[str] = field(default_factory=list)

    def add_enum_constant(self, constant: str) -> None:
        self.enum_constants.append(constant)

    def get_formatted_content(self, indent_level: int = 0) -> List[str]:
        indent = INDENT * indent_level
        lines = self.format_java_doc(indent)
        lines.append(f"{indent}{_declaration(*self._modifiers(), 'enum', self.name)} {{")
        if self.enum_constants:
            lines.append(f"{indent}{INDENT}{', '.join(self.enum_constants)};")
        lines.append(f"{indent}}}")
        return lines


@dataclass
class InnerClass(JavaElement):
    """A class body with its members"""
    super_class: Optional[str] = None
    fields: List[Field] = field(default_factory=list)
    methods: List[Method] = field(default_factory=list)
    inner_classes: List['InnerClass'] = field(default_factory=list)
    inner_enums: List[InnerEnum] = field(default_factory=list)

    def add_field(self, java_field: Field) -> None:
        self.fields.append(java_field)

    def add_method(self, method: Method) -> None:
        self.methods.append(method)

    def add_inner_class(self, inner_class: 'InnerClass') -> None:
        self.inner_classes.append(inner_class)

    def add_inner_enum(self, inner_enum: InnerEnum) -> None:
        self.inner_enums.append(inner_enum)

    def get_formatted_content(self, indent_level: int = 0) -> List[str]:
        indent = INDENT * indent_level
        header = _declaration(*self._modifiers(), "class", self.name)
        if self.super_class:
            header += f" extends {self.super_class}"

        lines = self.format_java_doc(indent)
        lines.append(f"{indent}{header} {{")

        # Members are separated by one blank line
        blocks = [f.get_formatted_content(indent_level + 1) for f in self.fields]
        blocks += [m.get_formatted_content(indent_level + 1) for m in self.methods]
        blocks += [c.get_formatted_content(indent_level + 1) for c in self.inner_classes]
        blocks += [e.get_formatted_content(indent_level + 1) for e in self.inner_enums]
        for i, block in enumerate(blocks):
            if i:
                lines.append("")
            lines.extend(block)

        lines.append(f"{indent}}}")
        return lines


@dataclass
class TopLevelClass(InnerClass):
    """A class that is a whole compilation unit"""
    package: str = ""
    imports: List[str] = field(default_factory=list)
    file_comment_lines: List[str] = field(default_factory=list)

    def add_import(self, fully_qualified_name: str) -> None:
        if fully_qualified_name not in self.imports:
            self.imports.append(fully_qualified_name)

    def add_file_comment_line(self, line: str) -> None:
        self.file_comment_lines.append(line)

    def get_formatted_source(self) -> str:
        lines = list(self.file_comment_lines)
        if self.package:
            lines.append(f"package {self.package};")
            lines.append("")
        if self.imports:
            lines.extend(f"import {name};" for name in sorted(self.imports))
            lines.append("")
        lines.extend(self.get_formatted_content())
        return "\n".join(lines) + "\n"
