"""
Forms for creating posts and comments.

These are plain forms rather than ModelForms: the workflows in
``blog.services`` own the model instances, so validation here never
touches a post before the ownership check has run.
"""
from django import forms
from django.template.defaultfilters import filesizeformat

from .conf import blog_settings

# Pillow reports multi-frame camera JPEGs as MPO
IMAGE_TYPE_ALIASES = {"image/mpo": "image/jpeg"}


class PostForm(forms.Form):
    title = forms.CharField(
        min_length=blog_settings.TITLE_MIN_LENGTH,
        max_length=255,
    )
    content = forms.CharField(widget=forms.Textarea(attrs={"rows": 8}))
    featured_image = forms.ImageField(
        required=False,
        widget=forms.FileInput(attrs={"accept": "image/*"}),
    )
    is_published = forms.BooleanField(required=False)

    def clean_featured_image(self):
        image = self.cleaned_data.get("featured_image")
        if not image:
            return image

        # ImageField sets content_type from the format Pillow detected
        content_type = getattr(image, "content_type", None)
        content_type = IMAGE_TYPE_ALIASES.get(content_type, content_type)
        if content_type not in blog_settings.ALLOWED_IMAGE_TYPES:
            raise forms.ValidationError(
                "Unsupported image type. Allowed types: %(types)s.",
                code="invalid_image_type",
                params={"types": ", ".join(blog_settings.ALLOWED_IMAGE_TYPES)},
            )

        max_bytes = blog_settings.MAX_IMAGE_SIZE_KB * 1024
        if image.size > max_bytes:
            raise forms.ValidationError(
                "Image is too large. Maximum size is %(max)s.",
                code="image_too_large",
                params={"max": filesizeformat(max_bytes)},
            )
        return image


class CommentForm(forms.Form):
    content = forms.CharField(
        min_length=blog_settings.COMMENT_MIN_LENGTH,
        label="Add a comment",
        widget=forms.Textarea(attrs={"rows": 3}),
    )
