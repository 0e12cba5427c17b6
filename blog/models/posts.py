"""
Post model for the blog app.
"""
from django.conf import settings
from django.core.validators import MinLengthValidator
from django.db import models
from django.db.models import Count
from django.urls import reverse
from django.utils.text import slugify

from ..conf import blog_settings

# Path segments under posts/ that a slug must not shadow
RESERVED_SLUGS = {"create"}


def get_image_upload_path(instance, filename):
    """Generate upload path for featured images."""
    return blog_settings.IMAGE_UPLOAD_PATH + filename


class PostQuerySet(models.QuerySet):
    def published(self):
        """Return only published posts, newest first."""
        return self.filter(is_published=True).order_by("-created_at", "-pk")

    def with_comment_count(self):
        return self.annotate(comment_count=Count("comments"))


class Post(models.Model):
    """
    Blog post.

    The slug is derived from the title on first save and is never
    regenerated afterwards, so renaming a post keeps its URL stable.
    Colliding slugs get a numeric suffix (``hello-world-1``).
    """

    title = models.CharField(
        max_length=255,
        validators=[MinLengthValidator(blog_settings.TITLE_MIN_LENGTH)],
    )
    slug = models.SlugField(max_length=255, unique=True, blank=True)
    content = models.TextField()
    featured_image = models.ImageField(
        upload_to=get_image_upload_path,
        blank=True,
    )
    is_published = models.BooleanField(default=False)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blog_posts",
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-pk"]
        indexes = [
            models.Index(
                fields=["is_published", "-created_at"],
                name="blog_post_published_idx",
            ),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        # Slug is assigned once, on creation
        if not self.slug:
            self.slug = self._generate_unique_slug()
        super().save(*args, **kwargs)

    def _generate_unique_slug(self):
        base_slug = slugify(self.title)[:blog_settings.SLUG_MAX_LENGTH].strip("-") or "post"
        slug = base_slug
        counter = 1
        while (
            slug in RESERVED_SLUGS
            or Post.objects.filter(slug=slug).exclude(pk=self.pk).exists()
        ):
            slug = f"{base_slug}-{counter}"
            counter += 1
        return slug

    def get_absolute_url(self):
        return reverse("blog:post_detail", kwargs={"slug": self.slug})

    @property
    def status_label(self):
        return "Published" if self.is_published else "Draft"

    def delete_featured_image(self):
        """Remove the stored image file, if any, without saving the post."""
        if self.featured_image:
            self.featured_image.delete(save=False)
