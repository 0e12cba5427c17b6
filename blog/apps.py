"""Django app configuration for blog."""
from django.apps import AppConfig


class BlogConfig(AppConfig):
    """Configuration for the blog app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "blog"
    verbose_name = "Blog"

    def ready(self):
        """Connect signal handlers."""
        from . import signals  # noqa: F401
