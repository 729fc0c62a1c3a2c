"""
Modelos de la aplicación de usuario.
"""
from phonenumber_field.modelfields import PhoneNumberField
from django.db import models
from django.contrib.auth.models import User


class Employee(models.Model):
    """Empleado - identidad que se muestra en la navegación"""
    user = models.OneToOneField(
        User,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='employee_profile',
    )
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    phone = PhoneNumberField(unique=True, blank=True, null=True)
    position = models.CharField(max_length=100, blank=True, default='')
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'employees'
        verbose_name = 'Empleado'
        verbose_name_plural = 'Empleados'

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def has_platform_access(self):
        """Verifica si tiene acceso activo a la plataforma"""
        return self.user is not None and self.is_active and self.user.is_active
