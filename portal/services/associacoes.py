"""
Family access requests (associações).

Professionals review every request through ``/associacoes``; a familiar
only sees their own through ``/familiares/me/associacoes``.  A request is
``pendente`` until a professional approves or rejects it, and only an
``aprovada`` request opens the admission to the familiar.
"""
from __future__ import annotations

from typing import Optional

from .context import PortalContext

PENDENTE = 'pendente'
APROVADA = 'aprovada'
REJEITADA = 'rejeitada'
STATUS_ASSOCIACAO = (PENDENTE, APROVADA, REJEITADA)
TODAS = 'TODAS'


def _status_params(status: Optional[str]) -> dict:
    return {'status': status} if status and status != TODAS else {}


# ---------------------------------------------------------------------
# Profissional
# ---------------------------------------------------------------------
def listar(ctx: PortalContext, status: Optional[str] = None) -> list[dict]:
    params = _status_params(status)
    return ctx.queries.fetch(('associacoes', params), lambda: ctx.api.get('/associacoes', params=params))


def aprovar(ctx: PortalContext, associacao_id: int) -> None:
    ctx.api.put(f'/associacoes/{associacao_id}/aprovar')
    ctx.queries.invalidate(('associacoes',))


def rejeitar(ctx: PortalContext, associacao_id: int) -> None:
    ctx.api.put(f'/associacoes/{associacao_id}/rejeitar')
    ctx.queries.invalidate(('associacoes',))


# ---------------------------------------------------------------------
# Familiar
# ---------------------------------------------------------------------
def listar_minhas(ctx: PortalContext, status: Optional[str] = None) -> list[dict]:
    params = _status_params(status)
    return ctx.queries.fetch(
        ('minhasAssociacoes', params),
        lambda: ctx.api.get('/familiares/me/associacoes', params=params),
    )


def obter_minha(ctx: PortalContext, associacao_id: int) -> dict:
    return ctx.queries.fetch(
        ('minhaAssociacao', associacao_id),
        lambda: ctx.api.get(f'/familiares/me/associacoes/{associacao_id}'),
    )


def internacoes_aprovadas(ctx: PortalContext, status_internacao: Optional[str] = None) -> list[dict]:
    """Approved requests, filtered locally by the admission's status."""
    aprovadas = listar_minhas(ctx, APROVADA)
    if not status_internacao or status_internacao == TODAS:
        return aprovadas
    return [a for a in aprovadas if (a.get('internacao') or {}).get('status') == status_internacao]


def criar(ctx: PortalContext, internacao_id: int) -> dict:
    associacao = ctx.api.post('/associacoes', json={'idInternacao': internacao_id})
    ctx.queries.invalidate(('minhasAssociacoes',))
    return associacao
