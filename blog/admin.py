"""
Django admin configuration for blog.

Comment approval lives here: nothing in the public workflows approves a
comment, so a moderator has to do it from the Comment changelist.
"""
from django.contrib import admin
from django.utils.html import format_html

from .models import Comment, Post


class CommentInline(admin.TabularInline):
    """Inline for reviewing comments on a post."""

    model = Comment
    extra = 0
    raw_id_fields = ["author"]
    fields = ["author", "content", "is_approved", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = [
        "title_preview",
        "author",
        "is_published",
        "comment_total",
        "created_at",
    ]
    list_filter = ["is_published", "created_at"]
    search_fields = ["title", "content", "author__username"]
    raw_id_fields = ["author"]
    date_hierarchy = "created_at"
    inlines = [CommentInline]
    readonly_fields = ["slug", "image_preview", "created_at", "updated_at"]

    fieldsets = (
        (None, {
            "fields": ("title", "slug", "content", "author")
        }),
        ("Image", {
            "fields": ("featured_image", "image_preview")
        }),
        ("Status", {
            "fields": ("is_published",)
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    actions = ["publish_posts", "unpublish_posts"]

    def get_queryset(self, request):
        return super().get_queryset(request).with_comment_count()

    def get_readonly_fields(self, request, obj=None):
        readonly = list(super().get_readonly_fields(request, obj))
        # Authorship is fixed once the post exists
        if obj is not None:
            readonly.append("author")
        return readonly

    def save_model(self, request, obj, form, change):
        """Remove the previous image file when it is replaced or cleared."""
        if change and "featured_image" in form.changed_data:
            previous = Post.objects.get(pk=obj.pk).featured_image
            if previous and previous.name != obj.featured_image.name:
                previous.delete(save=False)
        super().save_model(request, obj, form, change)

    @admin.display(description="Title")
    def title_preview(self, obj):
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    @admin.display(description="Comments", ordering="comment_count")
    def comment_total(self, obj):
        return obj.comment_count

    @admin.display(description="Preview")
    def image_preview(self, obj):
        if obj.featured_image:
            return format_html(
                '<img src="{}" style="max-width: 200px; max-height: 200px;" />',
                obj.featured_image.url,
            )
        return "-"

    @admin.action(description="Publish selected posts")
    def publish_posts(self, request, queryset):
        updated = queryset.update(is_published=True)
        self.message_user(request, f"{updated} posts published.")

    @admin.action(description="Unpublish selected posts")
    def unpublish_posts(self, request, queryset):
        updated = queryset.update(is_published=False)
        self.message_user(request, f"{updated} posts moved to drafts.")


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = [
        "preview",
        "author",
        "post",
        "is_approved",
        "created_at",
    ]
    list_filter = ["is_approved", "created_at"]
    search_fields = ["content", "author__username", "post__title"]
    raw_id_fields = ["post", "author"]
    readonly_fields = ["created_at", "updated_at"]
    actions = ["approve_comments", "reject_comments"]

    @admin.action(description="Approve selected comments")
    def approve_comments(self, request, queryset):
        updated = queryset.update(is_approved=True)
        self.message_user(request, f"{updated} comments approved.")

    @admin.action(description="Unapprove selected comments")
    def reject_comments(self, request, queryset):
        updated = queryset.update(is_approved=False)
        self.message_user(request, f"{updated} comments unapproved.")
