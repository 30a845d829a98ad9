from django.urls import path

from .views import GoogleAdsConnectionTestView

urlpatterns = [
    path('test-connection/googleAds/', GoogleAdsConnectionTestView.as_view(), name='test-connection-google-ads'),
]
