from .article_service import ArticleService
from .comment_service import CommentService
from .authorization_gate import AuthorizationGate
from .account_service import AccountService

__all__ = [
    "ArticleService",
    "CommentService",
    "AuthorizationGate",
    "AccountService",
]
