"""
codegen-comments - Javadoc comments for table-driven generated Java code
"""

__version__ = "0.1.0"

from .commenter import CommentAnnotator, CommentGenerator, MergeConstants
from .exceptions import CommentGeneratorError, ConfigurationError

__all__ = [
    "CommentAnnotator",
    "CommentGenerator",
    "MergeConstants",
    "CommentGeneratorError",
    "ConfigurationError",
]
