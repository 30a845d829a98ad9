from django.contrib import admin

from .models import Report


@admin.register(Report)
class ReportAdmin(admin.ModelAdmin):
    list_display = ('name', 'client', 'report_type', 'period_start', 'period_end', 'status', 'created_at')
    list_filter = ('report_type', 'status')
    readonly_fields = ('summary', 'created_at')
