from django.apps import AppConfig


class AccountSettingsConfig(AppConfig):
    name = 'apps.account_settings'
    label = 'account_settings'
