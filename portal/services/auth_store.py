"""
Session-backed authentication store.

The InfoCare API issues a bearer token and a small ``usuario`` payload on
login.  Both are kept server side in the Django session under a single
key so that the token never reaches the browser.  The stored
:class:`Usuario` doubles as the authenticated principal exposed to DRF
(``request.user``), hence the ``is_authenticated`` and ``pk`` members.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional

SESSION_KEY = 'infocare-auth-storage'

PROFISSIONAL = 'profissional'
FAMILIAR = 'familiar'
TIPOS = (PROFISSIONAL, FAMILIAR)


@dataclass(frozen=True)
class Usuario:
    id: int
    nome: str
    email: str
    tipo: str

    is_authenticated = True
    is_anonymous = False

    @property
    def pk(self) -> str:
        return f'{self.tipo}:{self.id}'

    @property
    def is_profissional(self) -> bool:
        return self.tipo == PROFISSIONAL

    @property
    def is_familiar(self) -> bool:
        return self.tipo == FAMILIAR

    @classmethod
    def from_payload(cls, data: dict, tipo: Optional[str] = None) -> 'Usuario':
        """Build a user from an API payload; ``tipo`` overrides the payload's."""
        tipo = tipo or data.get('tipo')
        if tipo not in TIPOS:
            raise ValueError(f'tipo de usuário inválido: {tipo!r}')
        return cls(id=int(data['id']), nome=data.get('nome') or '', email=data.get('email') or '', tipo=tipo)

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AuthState:
    token: Optional[str] = None
    usuario: Optional[Usuario] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.usuario)


def load(session) -> AuthState:
    """Read the auth state from ``session``; malformed data reads as logged out."""
    raw = session.get(SESSION_KEY)
    if not isinstance(raw, dict) or not raw.get('token') or not raw.get('usuario'):
        return AuthState()
    try:
        usuario = Usuario.from_payload(raw['usuario'])
    except (KeyError, TypeError, ValueError):
        return AuthState()
    return AuthState(token=raw['token'], usuario=usuario)


def login(session, token: str, usuario: Usuario) -> AuthState:
    # new session key on privilege change
    session.cycle_key()
    session[SESSION_KEY] = {'token': token, 'usuario': usuario.as_dict()}
    return AuthState(token=token, usuario=usuario)


def logout(session) -> None:
    session.pop(SESSION_KEY, None)
    session.cycle_key()


def set_usuario(session, usuario: Usuario) -> AuthState:
    """Replace the stored user while keeping the current token."""
    state = load(session)
    if not state.token:
        return state
    session[SESSION_KEY] = {'token': state.token, 'usuario': usuario.as_dict()}
    return AuthState(token=state.token, usuario=usuario)


def home_path(usuario: Optional[Usuario]) -> str:
    if usuario is None:
        return '/login'
    return '/profissional' if usuario.is_profissional else '/familiar'
