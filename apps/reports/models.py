from django.db import models


class Report(models.Model):
    class Meta:
        app_label = 'reports'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['client', 'created_at'], name='report_client_created_idx'),
        ]

    TYPE_WEEKLY = 'weekly'
    TYPE_MONTHLY = 'monthly'
    TYPE_CAMPAIGN = 'campaign'
    TYPE_CUSTOM = 'custom'
    TYPE_CHOICES = [
        (TYPE_WEEKLY, 'Semanal'),
        (TYPE_MONTHLY, 'Mensal'),
        (TYPE_CAMPAIGN, 'de Campanha'),
        (TYPE_CUSTOM, 'Personalizado'),
    ]

    STATUS_CHOICES = [
        ('ready', 'Ready'),
    ]

    client = models.ForeignKey('clients.Client', on_delete=models.CASCADE, related_name='reports')
    name = models.CharField(max_length=255)
    report_type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    period_start = models.DateField()
    period_end = models.DateField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ready')
    summary = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name
