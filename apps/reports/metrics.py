# apps/reports/metrics.py
"""
Where report summary numbers come from.

Reports ask a ``MetricsSource`` for their summary. The deployed source is
chosen by ``settings.REPORTS_METRICS_SOURCE``; until the aggregation over
ad-platform data lands, the default one produces placeholder values.
"""
import random
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass

from django.conf import settings
from django.utils.module_loading import import_string


@dataclass(frozen=True)
class ReportSummary:
    totalInvestment: float
    totalLeads: int
    totalConversions: int
    averageCPC: float
    averageCTR: float
    roas: float

    def to_dict(self):
        return asdict(self)


class MetricsSource(ABC):
    @abstractmethod
    def summarize(self, client, period_start, period_end) -> ReportSummary:
        pass


class RandomMetricsSource(MetricsSource):
    """Placeholder figures in the ranges the dashboard front-end was designed for."""

    def __init__(self, seed=None):
        self.rng = random.Random(seed)

    def summarize(self, client, period_start, period_end):
        rng = self.rng
        return ReportSummary(
            totalInvestment=round(rng.random() * 10000 + 5000, 2),
            totalLeads=int(rng.random() * 50 + 20),
            totalConversions=int(rng.random() * 20 + 5),
            averageCPC=round(rng.random() * 20 + 10, 2),
            averageCTR=round(rng.random() * 3 + 0.5, 2),
            roas=round(rng.random() * 2 + 1, 2),
        )


class StaticMetricsSource(MetricsSource):
    """Always returns the same summary."""

    DEFAULT_SUMMARY = ReportSummary(
        totalInvestment=7500.0,
        totalLeads=42,
        totalConversions=12,
        averageCPC=15.5,
        averageCTR=2.1,
        roas=1.8,
    )

    def __init__(self, summary=None):
        self.summary = summary or self.DEFAULT_SUMMARY

    def summarize(self, client, period_start, period_end):
        return self.summary


def get_metrics_source() -> MetricsSource:
    return import_string(settings.REPORTS_METRICS_SOURCE)()
