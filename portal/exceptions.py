"""
Unified DRF exception handler.

JSON endpoints get the ``{'ok': False, 'error': {'code', 'message'}}``
envelope.  Pages rendered with ``TemplateHTMLRenderer`` are answered the
way a browser expects instead: anonymous visitors and expired sessions
are sent to the login page, users of the other role are sent back to
their own home, and API failures render the error page.
"""
import logging

from django.contrib import messages
from django.shortcuts import redirect
from rest_framework import exceptions, status
from rest_framework.renderers import TemplateHTMLRenderer
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from .services import auth_store
from .services.backend import BackendError, BackendUnavailable, SessaoExpirada

logger = logging.getLogger(__name__)


def _wants_html(request) -> bool:
    return isinstance(getattr(request, 'accepted_renderer', None), TemplateHTMLRenderer)


def _error(code, message, http_status):
    return Response({'ok': False, 'error': {'code': code, 'message': message}}, status=http_status)


def _html_error(message, http_status):
    return Response(
        {'titulo': 'Erro', 'mensagem': message, 'status_code': http_status},
        status=http_status,
        template_name='portal/erro.html',
    )


def api_exception_handler(exc, context):
    request = context.get('request')
    html = request is not None and _wants_html(request)

    if isinstance(exc, SessaoExpirada):
        if request is not None:
            auth_store.logout(request.session)
            if html:
                messages.warning(request._request, 'Sessão expirada: faça login novamente.')
                return redirect('login')
        return _error('session_expired', exc.message, status.HTTP_401_UNAUTHORIZED)

    if isinstance(exc, BackendError):
        http_status = status.HTTP_502_BAD_GATEWAY if isinstance(exc, BackendUnavailable) else (exc.status_code or 502)
        if html:
            return _html_error(exc.message, http_status)
        return _error('backend_error', exc.message, http_status)

    if isinstance(exc, exceptions.NotAuthenticated):
        if html:
            return redirect('login')
        return _error('not_authenticated', str(exc.detail), status.HTTP_401_UNAUTHORIZED)
    if html and isinstance(exc, exceptions.PermissionDenied):
        user = getattr(request, 'user', None)
        detail = str(exc.detail)
        if user is None or detail.startswith('CSRF Failed'):
            return _html_error(detail, status.HTTP_403_FORBIDDEN)
        messages.error(request._request, detail)
        return redirect(auth_store.home_path(user))

    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception('Unhandled error in %s', getattr(context.get('view'), '__name__', context.get('view')))
        if html:
            return _html_error('Erro interno do servidor.', status.HTTP_500_INTERNAL_SERVER_ERROR)
        return _error('server_error', str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = str(resp.data)
    if html:
        return _html_error(detail, resp.status_code)
    code = getattr(exc, 'default_code', 'api_error')
    return _error(code, detail, resp.status_code)
