"""
Comment model for the blog app.
"""
from django.conf import settings
from django.core.validators import MinLengthValidator
from django.db import models

from ..conf import blog_settings


class CommentQuerySet(models.QuerySet):
    def approved(self):
        """Return approved comments, newest first."""
        return self.filter(is_approved=True).order_by("-created_at", "-pk")


class Comment(models.Model):
    """
    Comment on a post.

    Comments are created unapproved and only appear on the public thread
    once a moderator approves them from the admin.
    """

    post = models.ForeignKey(
        "blog.Post",
        on_delete=models.CASCADE,
        related_name="comments",
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_comments",
    )
    content = models.TextField(
        validators=[MinLengthValidator(blog_settings.COMMENT_MIN_LENGTH)],
    )
    is_approved = models.BooleanField(
        default=False,
        help_text="Whether comment is approved and visible",
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CommentQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-pk"]
        indexes = [
            models.Index(
                fields=["post", "is_approved", "created_at"],
                name="blog_comment_approved_idx",
            ),
        ]

    def __str__(self):
        return f"Comment by {self.author} on {self.post}"

    @property
    def preview(self):
        """Return truncated content for admin display."""
        if len(self.content) > 100:
            return self.content[:100] + "..."
        return self.content
