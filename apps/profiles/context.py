"""
Identidad del usuario para la barra de navegación.

Se construye en la vista y se pasa explícitamente al template como
``nav_user``; no se lee de ningún estado global.
"""
from dataclasses import dataclass

from django.core.exceptions import ObjectDoesNotExist


@dataclass(frozen=True)
class UserContext:
    username: str
    display_name: str
    email: str = ""
    position: str = ""
    is_authenticated: bool = True

    @property
    def initials(self):
        parts = [p for p in self.display_name.split() if p]
        return "".join(p[0].upper() for p in parts[:2])

    @classmethod
    def anonymous(cls):
        return cls(username="", display_name="Invitado", is_authenticated=False)

    @classmethod
    def from_user(cls, user):
        if user is None or not user.is_authenticated:
            return cls.anonymous()

        try:
            employee = user.employee_profile
        except ObjectDoesNotExist:
            employee = None

        if employee is not None and employee.is_active:
            return cls(
                username=user.get_username(),
                display_name=employee.full_name or user.get_username(),
                email=employee.email or user.email,
                position=employee.position,
            )

        return cls(
            username=user.get_username(),
            display_name=user.get_full_name() or user.get_username(),
            email=user.email,
        )
