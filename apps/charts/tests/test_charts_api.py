from unittest.mock import patch

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.clients.tests.helpers import make_admin, make_client, make_user


class ChartApiTest(APITestCase):
    def setUp(self):
        self.acme = make_client('acme', custom_charts=[
            {'id': 'chart_1', 'title': 'Cliques', 'type': 'line', 'createdAt': '2026-01-01T00:00:00+00:00'},
            {'id': 'chart_2', 'title': 'Custo', 'type': 'bar', 'createdAt': '2026-01-02T00:00:00+00:00'},
        ])
        self.user = make_user('ana@acme.test', client_slug='acme')
        self.client.force_authenticate(user=self.user)
        self.url = reverse('client-charts', kwargs={'client': 'acme'})

    def test_list_returns_stored_charts(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([chart['id'] for chart in response.json()['data']], ['chart_1', 'chart_2'])

    def test_list_is_empty_for_client_without_charts(self):
        make_client('globex')
        self.client.force_authenticate(user=make_admin())

        response = self.client.get(reverse('client-charts', kwargs={'client': 'globex'}))

        self.assertEqual(response.json()['data'], [])

    def test_new_chart_is_appended_with_generated_id(self):
        response = self.client.post(self.url, {'title': 'Conversões', 'type': 'pie'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        chart = response.json()['data']
        self.assertTrue(chart['id'].startswith('chart_'))
        self.assertEqual(chart['title'], 'Conversões')
        self.assertEqual(chart['createdAt'], chart['updatedAt'])

        self.acme.refresh_from_db()
        self.assertEqual(len(self.acme.custom_charts), 3)
        self.assertEqual(self.acme.custom_charts[-1]['id'], chart['id'])

    def test_chart_with_unknown_id_is_appended_under_that_id(self):
        response = self.client.post(self.url, {'id': 'chart_custom', 'title': 'CTR'})

        self.assertEqual(response.json()['data']['id'], 'chart_custom')
        self.acme.refresh_from_db()
        self.assertEqual(len(self.acme.custom_charts), 3)

    def test_existing_chart_is_replaced_in_place(self):
        response = self.client.post(self.url, {'id': 'chart_1', 'title': 'Impressões', 'type': 'area'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.acme.refresh_from_db()
        charts = self.acme.custom_charts
        self.assertEqual([chart['id'] for chart in charts], ['chart_1', 'chart_2'])
        self.assertEqual(charts[0]['title'], 'Impressões')
        self.assertEqual(charts[0]['createdAt'], '2026-01-01T00:00:00+00:00')
        self.assertNotEqual(charts[0]['updatedAt'], charts[0]['createdAt'])

    def test_body_must_be_an_object(self):
        response = self.client.post(self.url, [1, 2], format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['error'], 'INVALID_BODY')

    def test_chart_id_must_be_a_non_empty_string(self):
        for bad_id in (['x'], {'a': 1}, 42, '', '   '):
            response = self.client.post(self.url, {'id': bad_id, 'title': 'a'})
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
            self.assertEqual(response.json()['error'], 'INVALID_CHART_ID')

        self.acme.refresh_from_db()
        self.assertEqual(len(self.acme.custom_charts), 2)

        response = self.client.post(self.url, {'title': 'b'})
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_delete_removes_chart(self):
        response = self.client.delete(reverse('client-chart-detail', kwargs={'client': 'acme', 'chart_id': 'chart_1'}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.acme.refresh_from_db()
        self.assertEqual([chart['id'] for chart in self.acme.custom_charts], ['chart_2'])

    def test_delete_unknown_chart_is_not_found(self):
        response = self.client.delete(reverse('client-chart-detail', kwargs={'client': 'acme', 'chart_id': 'chart_9'}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['error'], 'CHART_NOT_FOUND')
        self.acme.refresh_from_db()
        self.assertEqual(len(self.acme.custom_charts), 2)

    def test_requires_session(self):
        self.client.force_authenticate(user=None)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['error'], 'UNAUTHENTICATED')

    def test_other_tenant_is_forbidden(self):
        make_client('globex', custom_charts=[{'id': 'chart_x'}])

        response = self.client.get(reverse('client-charts', kwargs={'client': 'globex'}))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()['error'], 'FORBIDDEN')
        self.assertNotIn('data', response.json())

    def test_admin_gets_not_found_for_unknown_client(self):
        self.client.force_authenticate(user=make_admin())

        response = self.client.get(reverse('client-charts', kwargs={'client': 'nobody'}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['error'], 'CLIENT_NOT_FOUND')

    def test_unexpected_failure_on_save(self):
        with patch('apps.charts.services.ClientRepository.update', side_effect=RuntimeError('db down')):
            response = self.client.post(self.url, {'title': 'x'})

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json()['error'], 'SAVE_CHART_ERROR')
