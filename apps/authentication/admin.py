from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class DashboardUserAdmin(UserAdmin):
    list_display = ('email', 'username', 'role', 'client_slug', 'is_active')
    list_filter = ('role', 'is_active')
    fieldsets = UserAdmin.fieldsets + (
        ('Dashboard', {'fields': ('role', 'client_slug')}),
    )
