from datetime import timedelta

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.clients.tests.helpers import make_client, make_user
from apps.reports.metrics import StaticMetricsSource
from apps.reports.models import Report


class ReportApiTest(APITestCase):
    def setUp(self):
        self.acme = make_client('acme')
        self.client.force_authenticate(user=make_user('ana@acme.test', client_slug='acme'))
        self.url = reverse('client-reports', kwargs={'client': 'acme'})

    def test_generate_weekly_report(self):
        response = self.client.post(self.url, {'type': 'weekly', 'period': {'days': 7}})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        report = response.json()['data']
        today = timezone.localdate()
        self.assertEqual(report['type'], 'weekly')
        self.assertEqual(report['status'], 'ready')
        self.assertEqual(report['clientId'], self.acme.pk)
        self.assertEqual(report['period']['end'], today.isoformat())
        self.assertEqual(report['period']['start'], (today - timedelta(days=7)).isoformat())
        self.assertEqual(report['name'], f"Relatório Semanal - {today:%d/%m/%Y}")
        self.assertEqual(report['summary'], StaticMetricsSource.DEFAULT_SUMMARY.to_dict())
        self.assertTrue(Report.objects.filter(pk=report['id'], client=self.acme).exists())

    def test_monthly_report_defaults_to_thirty_days(self):
        response = self.client.post(self.url, {'type': 'monthly'})

        period = response.json()['data']['period']
        today = timezone.localdate()
        self.assertEqual(period['start'], (today - timedelta(days=30)).isoformat())

    def test_campaign_report_without_days(self):
        response = self.client.post(self.url, {'type': 'campaign'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['error'], 'MISSING_PERIOD_DAYS')
        self.assertFalse(Report.objects.exists())

    def test_unknown_type_is_rejected(self):
        response = self.client.post(self.url, {'type': 'yearly'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertEqual(body['error'], 'VALIDATION_ERROR')
        self.assertIn('type', body['details'])

    def test_non_positive_days_are_rejected(self):
        response = self.client.post(self.url, {'type': 'custom', 'period': {'days': 0}})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_list_is_newest_first_with_total_count(self):
        first = self.client.post(self.url, {'type': 'weekly'}).json()['data']
        second = self.client.post(self.url, {'type': 'monthly'}).json()['data']
        other = make_client('globex')
        Report.objects.create(
            client=other, name='x', report_type='weekly',
            period_start=timezone.localdate(), period_end=timezone.localdate(), summary={},
        )

        response = self.client.get(self.url)

        body = response.json()
        self.assertEqual(body['totalCount'], 2)
        self.assertEqual([r['id'] for r in body['data']], [second['id'], first['id']])

    def test_other_tenant_is_forbidden(self):
        make_client('globex')

        response = self.client.post(reverse('client-reports', kwargs={'client': 'globex'}), {'type': 'weekly'})

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Report.objects.exists())

    def test_requires_session(self):
        self.client.force_authenticate(user=None)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
