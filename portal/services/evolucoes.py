from __future__ import annotations

from .context import PortalContext


def criar(ctx: PortalContext, internacao_id: int, descricao: str) -> dict:
    """Add a progress note; the admission detail is refetched afterwards."""
    evolucao = ctx.api.post('/evolucoes', json={'idInternacao': internacao_id, 'descricao': descricao})
    ctx.queries.invalidate(('internacao', (evolucao or {}).get('idInternacao', internacao_id)))
    return evolucao
