"""
Per-request bundle handed to the resource services.

Built by :class:`portal.middleware.PortalContextMiddleware` from the
session: the API client carries the stored token and the query cache is
scoped to the logged-in user.
"""
from __future__ import annotations

from dataclasses import dataclass

from . import auth_store
from .backend import BackendClient
from .query_cache import QueryCache, NullQueryCache


@dataclass
class PortalContext:
    session: object
    auth: auth_store.AuthState
    api: BackendClient
    queries: QueryCache

    @classmethod
    def from_session(cls, session) -> 'PortalContext':
        auth = auth_store.load(session)
        api = BackendClient(token=auth.token)
        queries = QueryCache(scope=auth.usuario.pk) if auth.is_authenticated else NullQueryCache()
        return cls(session=session, auth=auth, api=api, queries=queries)

    @property
    def usuario(self):
        return self.auth.usuario

    def set_usuario(self, usuario: auth_store.Usuario) -> None:
        self.auth = auth_store.set_usuario(self.session, usuario)
