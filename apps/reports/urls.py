from django.urls import path

from .views import ClientReportsView

urlpatterns = [
    path('reports/<slug:client>/', ClientReportsView.as_view(), name='client-reports'),
]
