from .article import Article, EXCERPT_LENGTH, EXCERPT_MARKER, derive_excerpt
from .comment import Comment
from .identity import CallerIdentity

__all__ = [
    "Article",
    "EXCERPT_LENGTH",
    "EXCERPT_MARKER",
    "derive_excerpt",
    "Comment",
    "CallerIdentity",
]
