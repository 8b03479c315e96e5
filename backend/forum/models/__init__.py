from forum.models.post import Post
from forum.models.reply import Reply
from forum.models.user import User

__all__ = [
    "Post",
    "Reply",
    "User",
]
