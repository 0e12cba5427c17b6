"""
Post and comment workflows.

Every operation takes the acting user explicitly instead of reading it
from the request, so the same rules apply to views, the shell and tests.
"""
import enum
import logging

from django.core.exceptions import PermissionDenied

from .models import Comment, Post
from .permissions import can_delete_comment, can_modify_post

logger = logging.getLogger(__name__)


class PublishAction(enum.Enum):
    """Which submit button was used on the create form."""

    PUBLISH = "publish"
    SAVE_DRAFT = "save_draft"
    DEFAULT = ""

    @classmethod
    def from_value(cls, value):
        try:
            return cls(value or "")
        except ValueError:
            return cls.DEFAULT

    def resolve(self, is_published):
        """
        Decide the published flag for a new post.

        An explicit button wins; without one the checkbox decides.
        """
        if self is PublishAction.PUBLISH:
            return True
        if self is PublishAction.SAVE_DRAFT:
            return False
        return bool(is_published)


def create_post(*, author, title, content, action=PublishAction.DEFAULT,
                is_published=False, image=None):
    """
    Create a post owned by ``author``.

    Raises ValidationError if title or content are invalid; nothing is
    written in that case.
    """
    post = Post(
        author=author,
        title=title,
        content=content,
        is_published=action.resolve(is_published),
    )
    if image:
        post.featured_image = image

    post.full_clean(exclude=["slug"])
    post.save()

    logger.info(
        "Post %s created by user %s (%s)",
        post.pk,
        author.pk,
        post.status_label.lower(),
    )
    return post


def update_post(post, *, user, title, content, is_published=False, image=None):
    """
    Update title, content, published flag and optionally the image.

    Only the checkbox controls publishing here. The slug is left alone.
    A new image replaces the old file; no image keeps the current one.
    """
    if not can_modify_post(user, post):
        logger.warning(
            "User %s denied update of post %s",
            getattr(user, "pk", None),
            post.pk,
        )
        raise PermissionDenied("You are not allowed to modify this post.")

    post.title = title
    post.content = content
    post.is_published = bool(is_published)
    post.full_clean(exclude=["slug", "featured_image"])

    if image:
        post.delete_featured_image()
        post.featured_image = image

    post.save()

    logger.info("Post %s updated by user %s", post.pk, user.pk)
    return post


def delete_post(post, *, user):
    """Delete a post, its stored image and (by cascade) its comments."""
    if not can_modify_post(user, post):
        logger.warning(
            "User %s denied deletion of post %s",
            getattr(user, "pk", None),
            post.pk,
        )
        raise PermissionDenied("You are not allowed to delete this post.")

    post_id = post.pk
    post.delete_featured_image()
    post.delete()

    logger.info("Post %s deleted by user %s", post_id, user.pk)


def create_comment(post, *, author, content):
    """
    Add a comment to ``post``.

    New comments start unapproved and stay off the public thread until a
    moderator approves them.
    """
    comment = Comment(post=post, author=author, content=content)
    comment.full_clean()
    comment.save()

    logger.info("Comment %s added to post %s by user %s", comment.pk, post.pk, author.pk)
    return comment


def delete_comment(comment, *, user):
    """
    Delete ``comment`` if ``user`` owns it or owns its post.

    Returns False, leaving the comment in place, when the user is not
    allowed to delete it.
    """
    if not can_delete_comment(user, comment, comment.post):
        logger.warning(
            "User %s denied deletion of comment %s",
            getattr(user, "pk", None),
            comment.pk,
        )
        return False

    comment_id = comment.pk
    comment.delete()

    logger.info("Comment %s deleted by user %s", comment_id, user.pk)
    return True
