"""
Rate limits for the login form and the dictation endpoint.

``api_view`` does not forward a ``throttle_scope`` attribute to the
wrapped view, so each scope gets its own throttle class instead.
"""
from rest_framework.throttling import SimpleRateThrottle


class LoginRateThrottle(SimpleRateThrottle):
    """Limit login attempts per client IP; only POSTs count."""
    scope = 'login'

    def allow_request(self, request, view):
        if request.method != 'POST':
            return True
        return super().allow_request(request, view)

    def get_cache_key(self, request, view):
        return self.cache_format % {'scope': self.scope, 'ident': self.get_ident(request)}


class TranscricaoRateThrottle(SimpleRateThrottle):
    scope = 'transcricao'

    def get_cache_key(self, request, view):
        user = getattr(request, 'user', None)
        ident = user.pk if user is not None and user.is_authenticated else self.get_ident(request)
        return self.cache_format % {'scope': self.scope, 'ident': ident}
