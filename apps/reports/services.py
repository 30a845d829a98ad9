# apps/reports/services.py
import logging
from datetime import timedelta

from django.utils import timezone

from core.exceptions import ValidationError
from .metrics import get_metrics_source
from .models import Report

logger = logging.getLogger(__name__)

# Period length used when the request does not say how many days to cover
DEFAULT_PERIOD_DAYS = {
    Report.TYPE_WEEKLY: 7,
    Report.TYPE_MONTHLY: 30,
}

TYPE_LABELS = dict(Report.TYPE_CHOICES)


def list_reports(client):
    return Report.objects.filter(client=client).order_by('-created_at', '-id')


def report_period(report_type, days=None, now=None):
    """Return ``(start, end)`` dates ending today and spanning ``days`` days."""
    if days is None:
        days = DEFAULT_PERIOD_DAYS.get(report_type)
        if days is None:
            raise ValidationError(
                'Informe period.days para relatórios de campanha ou personalizados',
                error_code='MISSING_PERIOD_DAYS',
            )

    end = timezone.localdate(now or timezone.now())
    return end - timedelta(days=days), end


def report_name(report_type, now=None):
    today = timezone.localdate(now or timezone.now())
    return f"Relatório {TYPE_LABELS[report_type]} - {today:%d/%m/%Y}"


def generate_report(client, report_type, days=None, metrics_source=None, now=None):
    """Build and persist a new report. Every call creates a new row."""
    now = now or timezone.now()
    start, end = report_period(report_type, days, now=now)
    source = metrics_source or get_metrics_source()

    report = Report.objects.create(
        client=client,
        name=report_name(report_type, now=now),
        report_type=report_type,
        period_start=start,
        period_end=end,
        status='ready',
        summary=source.summarize(client, start, end).to_dict(),
    )

    logger.info(f"Report {report.pk} ({report_type}, {start} to {end}) generated for client {client.slug}")
    return report
