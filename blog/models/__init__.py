"""
Models for the blog app.

All models are importable from blog.models:

    from blog.models import Post, Comment
"""
from .posts import Post
from .comments import Comment

__all__ = [
    "Post",
    "Comment",
]
