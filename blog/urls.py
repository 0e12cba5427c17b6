"""
URL configuration for the blog app.

Include in your project urls.py:

    path('', include('blog.urls')),
"""
from django.urls import path

from . import views

app_name = "blog"

urlpatterns = [
    # Post list and create
    path("posts/", views.PostListView.as_view(), name="post_list"),
    path("posts/create/", views.PostCreateView.as_view(), name="post_create"),

    # Post edit and delete, by id
    path("posts/<int:pk>/edit/", views.PostUpdateView.as_view(), name="post_update"),
    path("posts/<int:pk>/delete/", views.PostDeleteView.as_view(), name="post_delete"),

    # Comments
    path("posts/<int:pk>/comments/", views.CommentCreateView.as_view(), name="comment_create"),
    path("comments/<int:pk>/delete/", views.CommentDeleteView.as_view(), name="comment_delete"),

    # Post detail, by slug
    path("posts/<slug:slug>/", views.PostDetailView.as_view(), name="post_detail"),
]
