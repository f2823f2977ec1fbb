from __future__ import annotations

from .context import PortalContext


def listar(ctx: PortalContext) -> list[dict]:
    return ctx.queries.fetch(('pacientes',), lambda: ctx.api.get('/pacientes'))


def obter(ctx: PortalContext, paciente_id: int) -> dict:
    """Return the patient with its ``internacoes`` list."""
    return ctx.queries.fetch(('paciente', paciente_id), lambda: ctx.api.get(f'/pacientes/{paciente_id}'))


def criar(ctx: PortalContext, data: dict) -> dict:
    paciente = ctx.api.post('/pacientes', json=data)
    ctx.queries.invalidate(('pacientes',))
    return paciente


def atualizar(ctx: PortalContext, paciente_id: int, data: dict) -> dict:
    paciente = ctx.api.put(f'/pacientes/{paciente_id}', json=data)
    ctx.queries.invalidate(('pacientes',))
    ctx.queries.invalidate(('paciente', paciente_id))
    return paciente


def excluir(ctx: PortalContext, paciente_id: int) -> None:
    ctx.api.delete(f'/pacientes/{paciente_id}')
    ctx.queries.invalidate(('pacientes',))
    ctx.queries.invalidate(('paciente', paciente_id))
