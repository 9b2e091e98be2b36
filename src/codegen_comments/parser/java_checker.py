import logging
from dataclasses import dataclass, field
from typing import List

import javalang

from ..exceptions import JavaSyntaxError

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of parsing one rendered Java source"""
    errors: List[str] = field(default_factory=list)
    documented: List[str] = field(default_factory=list)
    undocumented: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0


class JavaSourceChecker:
    """
    Parse rendered Java to catch comments that break the source.

    Database remarks are copied into comments verbatim, so a remark holding
    ``*/`` ends the comment early and leaves the rest as code.
    """

    DECLARATION_TYPES = (
        javalang.tree.TypeDeclaration,
        javalang.tree.FieldDeclaration,
        javalang.tree.MethodDeclaration,
    )

    def check(self, source_code: str) -> CheckResult:
        result = CheckResult()

        try:
            tree = javalang.parse.parse(source_code)
        except javalang.parser.JavaSyntaxError as e:
            result.errors.append(self._describe_syntax_error(e))
            return result
        except javalang.tokenizer.LexerError as e:
            result.errors.append(f"Lexer error: {e}")
            return result

        for node_type in self.DECLARATION_TYPES:
            for _, node in tree.filter(node_type):
                name = self._node_name(node)
                if node.documentation:
                    result.documented.append(name)
                else:
                    result.undocumented.append(name)

        logger.debug(f"Checked source: {len(result.documented)} documented, "
                     f"{len(result.undocumented)} undocumented declarations")
        return result

    def require_valid(self, source_code: str) -> CheckResult:
        """
        Like check(), but raise when the source does not parse.

        Raises:
            JavaSyntaxError: with the parser messages
        """
        result = self.check(source_code)
        if not result.is_valid:
            raise JavaSyntaxError(result.errors)
        return result

    def _describe_syntax_error(self, error) -> str:
        position = getattr(error.at, 'position', None)
        if position:
            return f"Syntax error at line {position[0]}: {error.description}"
        return f"Syntax error: {error.description}"

    def _node_name(self, node) -> str:
        if isinstance(node, javalang.tree.FieldDeclaration):
            return ", ".join(declarator.name for declarator in node.declarators)
        return getattr(node, 'name', type(node).__name__)
