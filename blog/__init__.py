"""
django-blog - A server-rendered Django blog.

Features:
- Posts with draft / published states and an optional featured image
- Stable slugs derived from the title at creation time
- Comments with owner and post-owner deletion
- Comment moderation through the Django admin
"""

__version__ = "0.1.0"
