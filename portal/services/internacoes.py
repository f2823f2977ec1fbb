"""
Admission (internação) reads and mutations.

A list filter of ``TODAS`` sends no ``status`` parameter to the API.
"""
from __future__ import annotations

from typing import Optional

from .context import PortalContext

STATUS_INTERNACAO = ('ATIVA', 'ALTA')
TODAS = 'TODAS'


def _status_params(status: Optional[str]) -> dict:
    return {'status': status} if status and status != TODAS else {}


def listar(ctx: PortalContext, status: Optional[str] = None) -> list[dict]:
    params = _status_params(status)
    return ctx.queries.fetch(('internacoes', params), lambda: ctx.api.get('/internacoes', params=params))


def obter(ctx: PortalContext, internacao_id: int) -> dict:
    """Return the admission with ``paciente``, ``profissionalResponsavel`` and ``evolucoes``."""
    return ctx.queries.fetch(('internacao', internacao_id), lambda: ctx.api.get(f'/internacoes/{internacao_id}'))


def filtrar_por_paciente(internacoes: list[dict], termo: Optional[str]) -> list[dict]:
    """Keep admissions whose patient name contains ``termo`` (case-insensitive)."""
    termo = (termo or '').strip().lower()
    if not termo:
        return internacoes
    return [i for i in internacoes if termo in ((i.get('paciente') or {}).get('nome') or '').lower()]


def criar(ctx: PortalContext, data: dict) -> dict:
    internacao = ctx.api.post('/internacoes', json=data)
    ctx.queries.invalidate(('internacoes',))
    ctx.queries.invalidate(('paciente', internacao.get('idPaciente', data.get('idPaciente'))))
    return internacao


def dar_alta(ctx: PortalContext, internacao_id: int) -> dict:
    internacao = ctx.api.put(f'/internacoes/{internacao_id}/alta')
    ctx.queries.invalidate(('internacoes',))
    ctx.queries.invalidate(('internacao', internacao_id))
    return internacao


def atualizar(ctx: PortalContext, internacao_id: int, data: dict) -> dict:
    internacao = ctx.api.put(f'/internacoes/{internacao_id}', json=data)
    ctx.queries.invalidate(('internacoes',))
    # the PUT answer lacks paciente/evolucoes, so the detail is refetched
    ctx.queries.invalidate(('internacao', internacao_id))
    return internacao


def excluir(ctx: PortalContext, internacao_id: int) -> None:
    ctx.api.delete(f'/internacoes/{internacao_id}')
    ctx.queries.invalidate(('internacoes',))
    ctx.queries.invalidate(('internacao', internacao_id))
