"""
DRF authentication backed by the portal's auth store.

The logged-in :class:`~portal.services.auth_store.Usuario` kept in the
session becomes ``request.user`` and the API token becomes
``request.auth``.  CSRF is enforced exactly as DRF's own
``SessionAuthentication`` does, since the credential travels in the
session cookie.
"""
from __future__ import annotations

from rest_framework import authentication


class AuthStoreAuthentication(authentication.SessionAuthentication):
    """Authenticate from the ``infocare-auth-storage`` session entry."""

    def authenticate(self, request):
        portal = getattr(request._request, 'portal', None)
        if portal is None or not portal.auth.is_authenticated:
            return None
        self.enforce_csrf(request)
        return (portal.auth.usuario, portal.auth.token)
