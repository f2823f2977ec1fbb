from __future__ import annotations

from .auth_store import Usuario, FAMILIAR
from .backend import BackendClient
from .context import PortalContext


def registrar(data: dict) -> dict:
    """Create a familiar account; anonymous, so no token is sent."""
    return BackendClient().post('/familiares', json=data)


def obter_me(ctx: PortalContext) -> dict:
    return ctx.queries.fetch(('familiarMe',), lambda: ctx.api.get('/familiares/me'))


def atualizar_me(ctx: PortalContext, data: dict) -> dict:
    familiar = ctx.api.put('/familiares/me', json=data)
    ctx.set_usuario(Usuario.from_payload(familiar, tipo=FAMILIAR))
    ctx.queries.invalidate(('familiarMe',))
    return familiar
