from .base import CommentGenerator
from .comment_annotator import CommentAnnotator, MergeConstants

__all__ = [
    "CommentGenerator",
    "CommentAnnotator",
    "MergeConstants",
]
