from __future__ import annotations

from .auth_store import Usuario, PROFISSIONAL
from .context import PortalContext

ESPECIALIDADES = (
    ('MEDICO', 'Médico(a)'),
    ('ENFERMEIRO', 'Enfermeiro(a)'),
    ('TECNICO_ENFERMAGEM', 'Técnico(a) de Enfermagem'),
    ('FISIOTERAPEUTA', 'Fisioterapeuta'),
    ('NUTRICIONISTA', 'Nutricionista'),
    ('PSICOLOGO', 'Psicólogo(a)'),
    ('OUTRO', 'Outro'),
)


def obter_me(ctx: PortalContext) -> dict:
    return ctx.queries.fetch(('profissionalMe',), lambda: ctx.api.get('/profissionais/me'))


def atualizar_me(ctx: PortalContext, data: dict) -> dict:
    profissional = ctx.api.put('/profissionais/me', json=data)
    ctx.set_usuario(Usuario.from_payload(profissional, tipo=PROFISSIONAL))
    ctx.queries.invalidate(('profissionalMe',))
    return profissional
