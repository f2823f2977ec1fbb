"""
Login against the InfoCare API.

Each role has its own login route; a 401 there means bad credentials and
is reported as an ordinary :class:`BackendError`.
"""
from __future__ import annotations

from .auth_store import Usuario, PROFISSIONAL
from .backend import BackendClient, BackendError

LOGIN_ENDPOINTS = {
    'profissional': '/profissionais/login',
    'familiar': '/familiares/login',
}


def autenticar(email: str, senha: str, tipo_usuario: str) -> tuple[str, Usuario]:
    data = BackendClient().post(LOGIN_ENDPOINTS[tipo_usuario], json={'email': email, 'senha': senha})
    try:
        token = data['token']
        usuario = Usuario.from_payload(data['usuario'])
    except (KeyError, TypeError, ValueError) as e:
        raise BackendError('Resposta de login inválida do servidor.') from e
    return token, usuario
