"""
Exception classes for codegen-comments.

Everything raised by the package derives from CommentGeneratorError so hosts
can catch the whole family in one place.
"""

from typing import List, Optional


class CommentGeneratorError(Exception):
    """Base exception for all comment generator errors."""

    pass


class ConfigurationError(CommentGeneratorError):
    """Invalid comment generator configuration.

    Raised synchronously while properties are being applied, never later
    while comments are generated.

    Attributes:
        key: The property key that failed, if known
        value: The offending value, if known
        message: Description of the error
    """

    def __init__(self, message: str, key: Optional[str] = None, value: Optional[str] = None):
        self.key = key
        self.value = value
        self.message = message
        if key is not None:
            super().__init__(f"{key}={value!r}: {message}")
        else:
            super().__init__(message)


class InputError(CommentGeneratorError):
    """Malformed table description handed to the preview driver."""

    pass


class JavaSyntaxError(CommentGeneratorError):
    """Rendered Java source failed to parse.

    Attributes:
        errors: Parser messages collected for the source
    """

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors) if errors else "Java source failed to parse")
