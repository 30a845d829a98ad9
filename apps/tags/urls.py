from django.urls import path

from .views import TagDetailView, TagListView

urlpatterns = [
    path('admin/tags/', TagListView.as_view(), name='tag-list'),
    path('admin/tags/<path:tag_id>/', TagDetailView.as_view(), name='tag-detail'),
]
