# apps/charts/services.py
import logging
import time

from django.utils import timezone

from apps.clients.repository import ClientRepository
from core.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


def _new_chart_id(existing_ids):
    stamp = int(time.time() * 1000)
    while f"chart_{stamp}" in existing_ids:
        stamp += 1
    return f"chart_{stamp}"


def list_charts(client):
    return list(client.custom_charts or [])


def upsert_chart(client, chart_config):
    """Replace the chart whose id matches ``chart_config['id']`` or append a new one.

    Charts are not rows of their own, so the whole list is written back.
    """
    chart_id = chart_config.get('id')
    if chart_id is not None and (not isinstance(chart_id, str) or not chart_id.strip()):
        raise ValidationError('O id do gráfico deve ser um texto não vazio', error_code='INVALID_CHART_ID')

    charts = list(client.custom_charts or [])
    now = timezone.now().isoformat()

    position = next((i for i, chart in enumerate(charts) if chart_id and chart.get('id') == chart_id), None)

    if position is not None:
        chart = {
            **chart_config,
            'id': chart_id,
            'createdAt': charts[position].get('createdAt', now),
            'updatedAt': now,
        }
        charts[position] = chart
        logger.info(f"Chart {chart_id} updated for client {client.slug}")
    else:
        chart = {
            **chart_config,
            'id': chart_id or _new_chart_id({c.get('id') for c in charts}),
            'createdAt': now,
            'updatedAt': now,
        }
        charts.append(chart)
        logger.info(f"Chart {chart['id']} created for client {client.slug}")

    ClientRepository.update(client, custom_charts=charts)
    return chart


def delete_chart(client, chart_id):
    charts = list(client.custom_charts or [])
    remaining = [chart for chart in charts if chart.get('id') != chart_id]

    if len(remaining) == len(charts):
        raise NotFound('Gráfico não encontrado', error_code='CHART_NOT_FOUND')

    ClientRepository.update(client, custom_charts=remaining)
    logger.info(f"Chart {chart_id} deleted for client {client.slug}")
