from django.db import models


class Client(models.Model):
    """Tenant record. Tags, custom charts and preferences live on the row as JSON."""

    slug = models.SlugField(max_length=100, unique=True)
    name = models.CharField(max_length=200)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=50, blank=True)
    website = models.CharField(max_length=200, blank=True)
    address = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)

    tags = models.JSONField(default=list, blank=True)  # ordered, duplicates allowed
    custom_charts = models.JSONField(default=list, blank=True)
    settings = models.JSONField(default=dict, blank=True)  # notifications, privacy
    integrations = models.JSONField(default=dict, blank=True)  # googleAds, facebookAds, googleAnalytics

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = 'clients'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.slug})"
