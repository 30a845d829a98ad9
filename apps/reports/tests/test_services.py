from datetime import date, datetime, timezone as dt_timezone

from django.test import SimpleTestCase, TestCase

from apps.clients.tests.helpers import make_client
from apps.reports import services
from apps.reports.metrics import RandomMetricsSource, ReportSummary, StaticMetricsSource
from apps.reports.models import Report
from core.exceptions import ValidationError

NOW = datetime(2026, 10, 19, 15, 0, tzinfo=dt_timezone.utc)


class ReportPeriodTest(SimpleTestCase):
    def test_weekly_and_monthly_defaults(self):
        self.assertEqual(services.report_period('weekly', now=NOW), (date(2026, 10, 12), date(2026, 10, 19)))
        self.assertEqual(services.report_period('monthly', now=NOW), (date(2026, 9, 19), date(2026, 10, 19)))

    def test_explicit_days_override_default(self):
        self.assertEqual(services.report_period('weekly', days=14, now=NOW), (date(2026, 10, 5), date(2026, 10, 19)))

    def test_campaign_and_custom_need_days(self):
        for report_type in ('campaign', 'custom'):
            with self.assertRaises(ValidationError) as ctx:
                services.report_period(report_type, now=NOW)
            self.assertEqual(ctx.exception.error_code, 'MISSING_PERIOD_DAYS')

    def test_end_date_follows_local_time_zone(self):
        # 01:00 UTC is still the previous day in Sao Paulo
        late = datetime(2026, 10, 20, 1, 0, tzinfo=dt_timezone.utc)
        self.assertEqual(services.report_period('weekly', now=late)[1], date(2026, 10, 19))

    def test_report_name(self):
        self.assertEqual(services.report_name('weekly', now=NOW), 'Relatório Semanal - 19/10/2026')
        self.assertEqual(services.report_name('campaign', now=NOW), 'Relatório de Campanha - 19/10/2026')


class GenerateReportTest(TestCase):
    def setUp(self):
        self.acme = make_client('acme')

    def test_creates_ready_report_with_summary(self):
        report = services.generate_report(self.acme, 'monthly', now=NOW)

        report.refresh_from_db()
        self.assertEqual(report.client, self.acme)
        self.assertEqual(report.status, 'ready')
        self.assertEqual(report.name, 'Relatório Mensal - 19/10/2026')
        self.assertEqual(report.period_start, date(2026, 9, 19))
        self.assertEqual(report.period_end, date(2026, 10, 19))
        self.assertEqual(report.summary, StaticMetricsSource.DEFAULT_SUMMARY.to_dict())

    def test_uses_given_metrics_source(self):
        summary = ReportSummary(1.0, 2, 3, 4.0, 5.0, 6.0)

        report = services.generate_report(self.acme, 'custom', days=3, metrics_source=StaticMetricsSource(summary), now=NOW)

        self.assertEqual(report.summary['totalLeads'], 2)
        self.assertEqual(report.period_start, date(2026, 10, 16))

    def test_every_call_creates_a_new_report(self):
        services.generate_report(self.acme, 'weekly', now=NOW)
        services.generate_report(self.acme, 'weekly', now=NOW)

        self.assertEqual(Report.objects.filter(client=self.acme).count(), 2)


class RandomMetricsSourceTest(SimpleTestCase):
    def test_values_fall_in_dashboard_ranges(self):
        source = RandomMetricsSource(seed=7)
        for _ in range(50):
            summary = source.summarize(None, None, None)
            self.assertTrue(5000 <= summary.totalInvestment <= 15000)
            self.assertTrue(20 <= summary.totalLeads < 70)
            self.assertTrue(5 <= summary.totalConversions < 25)
            self.assertTrue(10 <= summary.averageCPC <= 30)
            self.assertTrue(0.5 <= summary.averageCTR <= 3.5)
            self.assertTrue(1 <= summary.roas <= 3)

    def test_same_seed_same_numbers(self):
        first = RandomMetricsSource(seed=1).summarize(None, None, None)
        second = RandomMetricsSource(seed=1).summarize(None, None, None)
        self.assertEqual(first, second)
