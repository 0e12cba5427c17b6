"""
Signal handlers for the blog app.
"""
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Post


@receiver(post_delete, sender=Post)
def delete_post_image(sender, instance, **kwargs):
    """Remove the featured image file when a post row goes away."""
    instance.delete_featured_image()
