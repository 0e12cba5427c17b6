"""
Configuration settings for the blog app.

Override these in your Django settings.py:

    BLOG = {
        'POSTS_PER_PAGE': 10,
        'COMMENTS_PER_PAGE': 20,
        'MAX_IMAGE_SIZE_KB': 2048,
        ...
    }
"""
from django.conf import settings

DEFAULTS = {
    # Pagination
    "POSTS_PER_PAGE": 10,
    "COMMENTS_PER_PAGE": 20,

    # Featured images
    "IMAGE_UPLOAD_PATH": "posts/",
    "ALLOWED_IMAGE_TYPES": ["image/jpeg", "image/png", "image/gif"],
    "MAX_IMAGE_SIZE_KB": 2048,

    # Validation
    "TITLE_MIN_LENGTH": 5,
    "COMMENT_MIN_LENGTH": 5,

    # Slugs are truncated to leave room for a collision suffix
    "SLUG_MAX_LENGTH": 240,
}


class BlogSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog setting: {name}")

        user_settings = getattr(settings, "BLOG", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = BlogSettings()
