from django.contrib import admin
from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'email', 'position', 'is_active', 'platform_status']
    search_fields = ['first_name', 'last_name', 'email']

    def platform_status(self, obj):
        if obj.has_platform_access():
            return "✓ Activo"
        return "- Sin acceso"
    platform_status.short_description = 'Estado'
