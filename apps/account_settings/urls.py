from django.urls import path

from .views import ClientSettingsView

urlpatterns = [
    path('settings/<slug:client>/', ClientSettingsView.as_view(), name='client-settings'),
]
