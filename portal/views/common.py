"""
Helpers shared by the page views.
"""
from __future__ import annotations

from urllib.parse import urlencode

from django.shortcuts import redirect
from rest_framework import status
from rest_framework.response import Response

from ..services.backend import BackendError


def page(template: str, context: dict | None = None, http_status: int = status.HTTP_200_OK) -> Response:
    return Response(context or {}, template_name=template, status=http_status)


def form_errors(errors) -> dict[str, list[str]]:
    """Flatten serializer errors (or a BackendError) into ``{campo: [mensagens]}``."""
    if isinstance(errors, BackendError):
        return errors.field_errors()
    flat: dict[str, list[str]] = {}
    for campo, mensagens in (errors or {}).items():
        if isinstance(mensagens, (list, tuple)):
            flat[campo] = [str(m) for m in mensagens]
        else:
            flat[campo] = [str(mensagens)]
    return flat


def backend_status(exc: BackendError) -> int:
    """Status used when a page re-renders after an API failure."""
    if exc.status_code and 400 <= exc.status_code < 500:
        return exc.status_code
    return status.HTTP_502_BAD_GATEWAY


def back_to(fallback: str, **query):
    """Redirect to ``fallback`` keeping the given non-empty query parameters."""
    params = {k: v for k, v in query.items() if v}
    if params:
        return redirect(f'{fallback}?{urlencode(params)}')
    return redirect(fallback)
