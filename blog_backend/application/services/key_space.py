"""Key-space layout for the blog content stored in the key-value store.

    article:<articleId>               → article record
    comment:<articleId>:<commentId>   → comment record

Comment keys carry the owning article id, so "comments of one article" and
"all comments" are both plain prefix scans.
"""

ARTICLE_PREFIX = "article:"
COMMENT_PREFIX = "comment:"


def article_key(article_id: str) -> str:
    return f"{ARTICLE_PREFIX}{article_id}"


def comment_prefix(article_id: str) -> str:
    return f"{COMMENT_PREFIX}{article_id}:"


def comment_key(article_id: str, comment_id: str) -> str:
    return f"{comment_prefix(article_id)}{comment_id}"
