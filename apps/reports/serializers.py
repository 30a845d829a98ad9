from rest_framework import serializers

from .models import Report


class ReportSerializer(serializers.ModelSerializer):
    clientId = serializers.IntegerField(source='client_id', read_only=True)
    type = serializers.CharField(source='report_type', read_only=True)
    period = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Report
        fields = ('id', 'clientId', 'name', 'type', 'period', 'status', 'summary', 'createdAt')

    def get_period(self, obj):
        return {
            'start': obj.period_start.isoformat(),
            'end': obj.period_end.isoformat(),
        }


class PeriodSerializer(serializers.Serializer):
    days = serializers.IntegerField(min_value=1, max_value=3650, required=False)


class GenerateReportSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=[choice for choice, _ in Report.TYPE_CHOICES])
    period = PeriodSerializer(required=False)
