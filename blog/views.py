"""
Views for the blog app.
"""
import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied, ValidationError
from django.core.paginator import Paginator
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import DetailView, FormView, ListView, TemplateView
from django.views.generic.detail import SingleObjectMixin

from . import services
from .conf import blog_settings
from .forms import CommentForm, PostForm
from .models import Comment, Post
from .permissions import can_modify_post

logger = logging.getLogger(__name__)


def redirect_back(request, fallback_url):
    """Redirect to the referring page if it is on this site, else to fallback_url."""
    referer = request.META.get("HTTP_REFERER")
    if referer and url_has_allowed_host_and_scheme(
        referer,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return redirect(referer)
    return redirect(fallback_url)


def get_comment_page(request, post):
    """Return the requested page of a post's approved comments."""
    comments = post.comments.approved().select_related("author", "post")
    paginator = Paginator(comments, blog_settings.COMMENTS_PER_PAGE)
    return paginator.get_page(request.GET.get("page"))


class PostOwnerMixin:
    """
    Load the post named by the ``pk`` URL kwarg and require the requesting
    user to be its author. Place after LoginRequiredMixin.
    """

    def dispatch(self, request, *args, **kwargs):
        self.object = get_object_or_404(Post, pk=kwargs["pk"])
        if not can_modify_post(request.user, self.object):
            logger.warning(
                "User %s blocked from %s on post %s",
                request.user.pk,
                self.__class__.__name__,
                self.object.pk,
            )
            raise PermissionDenied("You are not allowed to modify this post.")
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["post"] = self.object
        return context


class PostListView(ListView):
    """List published posts with pagination."""

    template_name = "blog/post_list.html"
    context_object_name = "posts"
    paginate_by = blog_settings.POSTS_PER_PAGE

    def paginate_queryset(self, queryset, page_size):
        # Clamp bad page numbers like the comment thread does, instead of 404
        paginator = self.get_paginator(queryset, page_size)
        page = paginator.get_page(self.request.GET.get(self.page_kwarg))
        return paginator, page, page.object_list, page.has_other_pages()

    def get_queryset(self):
        return (
            Post.objects.published()
            .with_comment_count()
            .select_related("author")
        )


class PostDetailView(DetailView):
    """Display a single post and its approved comments."""

    model = Post
    template_name = "blog/post_detail.html"
    context_object_name = "post"

    def get_queryset(self):
        return Post.objects.select_related("author")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["comments"] = get_comment_page(self.request, self.object)
        context["comment_form"] = CommentForm()
        return context


class PostCreateView(LoginRequiredMixin, FormView):
    """Create a new post, either published or as a draft."""

    form_class = PostForm
    template_name = "blog/post_form.html"
    initial = {"is_published": True}

    def form_valid(self, form):
        action = services.PublishAction.from_value(self.request.POST.get("action"))
        try:
            post = services.create_post(
                author=self.request.user,
                title=form.cleaned_data["title"],
                content=form.cleaned_data["content"],
                action=action,
                is_published=form.cleaned_data["is_published"],
                image=form.cleaned_data["featured_image"],
            )
        except ValidationError as e:
            form.add_error(None, e)
            return self.form_invalid(form)

        if post.is_published:
            messages.success(self.request, "Post published successfully!")
        else:
            messages.success(self.request, "Post saved as draft successfully!")
        return redirect(post)


class PostUpdateView(LoginRequiredMixin, PostOwnerMixin, FormView):
    """Edit an existing post. Author only."""

    form_class = PostForm
    template_name = "blog/post_form.html"

    def get_initial(self):
        return {
            "title": self.object.title,
            "content": self.object.content,
            "is_published": self.object.is_published,
        }

    def form_valid(self, form):
        try:
            services.update_post(
                self.object,
                user=self.request.user,
                title=form.cleaned_data["title"],
                content=form.cleaned_data["content"],
                is_published=form.cleaned_data["is_published"],
                image=form.cleaned_data["featured_image"],
            )
        except ValidationError as e:
            form.add_error(None, e)
            return self.form_invalid(form)

        messages.success(self.request, "Post updated successfully!")
        return redirect(self.object)


class PostDeleteView(LoginRequiredMixin, PostOwnerMixin, TemplateView):
    """Delete a post with its comments and image. Author only."""

    template_name = "blog/post_confirm_delete.html"
    success_url = reverse_lazy("blog:post_list")
    http_method_names = ["get", "post", "delete"]

    def post(self, request, *args, **kwargs):
        services.delete_post(self.object, user=request.user)
        messages.success(request, "Post deleted successfully!")
        return redirect(self.success_url)

    def delete(self, request, *args, **kwargs):
        return self.post(request, *args, **kwargs)


class CommentCreateView(LoginRequiredMixin, SingleObjectMixin, FormView):
    """
    Add a comment to a post.

    Invalid submissions re-render the post page with the bound form.
    """

    model = Post
    form_class = CommentForm
    template_name = "blog/post_detail.html"
    context_object_name = "post"
    http_method_names = ["post"]

    def post(self, request, *args, **kwargs):
        self.object = self.get_object()
        return super().post(request, *args, **kwargs)

    def form_valid(self, form):
        services.create_comment(
            self.object,
            author=self.request.user,
            content=form.cleaned_data["content"],
        )
        messages.success(self.request, "Comment added successfully!")
        return redirect_back(self.request, self.object.get_absolute_url())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["comments"] = get_comment_page(self.request, self.object)
        context["comment_form"] = context["form"]
        return context


class CommentDeleteView(LoginRequiredMixin, View):
    """
    Delete a comment.

    Users who may not delete it get a flash error instead of a 403.
    """

    http_method_names = ["post", "delete"]

    def post(self, request, pk):
        comment = get_object_or_404(Comment.objects.select_related("post"), pk=pk)
        post = comment.post

        if services.delete_comment(comment, user=request.user):
            messages.success(request, "Comment deleted successfully!")
        else:
            messages.error(request, "You are not authorized to delete this comment.")
        return redirect_back(request, post.get_absolute_url())

    def delete(self, request, pk):
        return self.post(request, pk)
