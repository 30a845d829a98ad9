from rest_framework import serializers

RETENTION_CHOICES = ['3months', '6months', '12months', '24months', 'forever']


class ProfileSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200, required=False)
    email = serializers.EmailField(required=False, allow_blank=True)
    phone = serializers.CharField(max_length=50, required=False, allow_blank=True)
    company = serializers.CharField(required=False, allow_blank=True)  # mirrors name, ignored
    website = serializers.CharField(max_length=200, required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)


class NotificationsSerializer(serializers.Serializer):
    emailReports = serializers.BooleanField(required=False)
    emailAlerts = serializers.BooleanField(required=False)
    weeklyDigest = serializers.BooleanField(required=False)
    campaignUpdates = serializers.BooleanField(required=False)
    budgetAlerts = serializers.BooleanField(required=False)
    performanceAlerts = serializers.BooleanField(required=False)


class PrivacySerializer(serializers.Serializer):
    dataRetention = serializers.ChoiceField(choices=RETENTION_CHOICES, required=False)
    allowAnalytics = serializers.BooleanField(required=False)
    shareData = serializers.BooleanField(required=False)
    marketingEmails = serializers.BooleanField(required=False)


class ClientSettingsSerializer(serializers.Serializer):
    profile = ProfileSerializer(required=False)
    notifications = NotificationsSerializer(required=False)
    privacy = PrivacySerializer(required=False)
    integrations = serializers.DictField(required=False)  # accepted, read-only server side
