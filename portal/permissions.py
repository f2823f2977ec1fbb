"""
Role based permission classes for the two InfoCare user types.
"""
from rest_framework.permissions import BasePermission

from .services.auth_store import PROFISSIONAL, FAMILIAR


class IsProfissional(BasePermission):
    """Allow access only to healthcare professionals."""
    message = 'Acesso restrito a profissionais de saúde.'

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "tipo", None) == PROFISSIONAL)


class IsFamiliar(BasePermission):
    """Allow access only to family members."""
    message = 'Acesso restrito a familiares.'

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "tipo", None) == FAMILIAR)
