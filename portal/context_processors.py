def auth_state(request):
    """Expose the logged-in InfoCare user to every template."""
    portal = getattr(request, 'portal', None)
    if portal is None:
        return {'usuario': None, 'is_authenticated': False}
    return {'usuario': portal.usuario, 'is_authenticated': portal.auth.is_authenticated}
