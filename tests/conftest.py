"""
Shared fixtures for the blog test suite.
"""
import io

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from blog.models import Comment, Post

User = get_user_model()


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Store uploaded files in a per-test temporary directory."""
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path


@pytest.fixture
def make_image():
    """Return a factory building small in-memory image uploads."""

    def _make_image(name="photo.png", image_format="PNG", size=(10, 10)):
        buffer = io.BytesIO()
        Image.new("RGB", size, "red").save(buffer, format=image_format)
        return SimpleUploadedFile(
            name,
            buffer.getvalue(),
            content_type=f"image/{image_format.lower()}",
        )

    return _make_image


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def other_user(db):
    """Create a second user who owns nothing."""
    return User.objects.create_user(
        username="other",
        email="other@example.com",
        password="testpass123",
    )


@pytest.fixture
def post(db, user):
    """Create a published post owned by ``user``."""
    return Post.objects.create(
        title="Hello World Blog",
        content="This is a test post body.",
        author=user,
        is_published=True,
    )


@pytest.fixture
def comment(db, post, other_user):
    """Create an approved comment by ``other_user`` on ``post``."""
    return Comment.objects.create(
        post=post,
        author=other_user,
        content="Great post, thanks!",
        is_approved=True,
    )
