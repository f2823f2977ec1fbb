from django.utils.functional import SimpleLazyObject

from .services.context import PortalContext


class PortalContextMiddleware:
    """Attach ``request.portal`` (auth state, API client, query cache).

    Must run after ``SessionMiddleware``.  The context is built lazily so
    static and metrics requests never touch the session.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.portal = SimpleLazyObject(lambda: PortalContext.from_session(request.session))
        return self.get_response(request)
