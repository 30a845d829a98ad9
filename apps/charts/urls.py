from django.urls import path

from .views import ClientChartDetailView, ClientChartsView

urlpatterns = [
    path('charts/<slug:client>/', ClientChartsView.as_view(), name='client-charts'),
    path('charts/<slug:client>/<str:chart_id>/', ClientChartDetailView.as_view(), name='client-chart-detail'),
]
