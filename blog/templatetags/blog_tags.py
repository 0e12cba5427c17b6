"""
Template filters exposing the ownership rules to blog templates.
"""
from django import template

from ..permissions import can_delete_comment, can_modify_post

register = template.Library()


@register.filter
def editable_by(post, user):
    """Usage: {% if post|editable_by:user %}"""
    return can_modify_post(user, post)


@register.filter
def deletable_by(comment, user):
    """Usage: {% if comment|deletable_by:user %}"""
    return can_delete_comment(user, comment, comment.post)
