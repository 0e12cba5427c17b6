"""
Ownership rules for mutating posts and comments.

These are plain predicates: callers decide what a ``False`` means. Post
views turn it into a 403, comment deletion into a flash error.
"""


def can_modify_post(user, post):
    """Only the author may edit, update or delete a post."""
    if user is None or not user.is_authenticated:
        return False
    return user.pk == post.author_id


def can_delete_comment(user, comment, post=None):
    """
    A comment may be deleted by its own author or by the author of the
    post it belongs to.
    """
    if user is None or not user.is_authenticated:
        return False
    if post is None:
        post = comment.post
    return user.pk == comment.author_id or user.pk == post.author_id
