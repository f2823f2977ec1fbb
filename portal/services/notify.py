"""
Flash notifications shown on the next rendered page.

Each notification has a title and an optional description, mirroring the
toasts of the InfoCare UI.  Error notifications take their description
from the API's ``message`` and fall back to a per-operation default.
"""
from __future__ import annotations

from typing import Optional

from django.contrib import messages

from .backend import BackendError


def _add(request, level: int, titulo: str, descricao: Optional[str] = None) -> None:
    texto = f'{titulo} {descricao}' if descricao else titulo
    messages.add_message(getattr(request, '_request', request), level, texto)


def success(request, titulo: str, descricao: Optional[str] = None) -> None:
    _add(request, messages.SUCCESS, titulo, descricao)


def info(request, titulo: str, descricao: Optional[str] = None) -> None:
    _add(request, messages.INFO, titulo, descricao)


def error(request, titulo: str, exc: Optional[BackendError] = None, fallback: Optional[str] = None) -> None:
    descricao = exc.message if exc is not None else None
    if fallback and (descricao is None or descricao == BackendError.default_message):
        descricao = fallback
    _add(request, messages.ERROR, titulo, descricao)
