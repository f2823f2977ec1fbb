"""
HTTP client for the InfoCare REST API.

Every page of the portal reads and writes its records through
:class:`BackendClient`.  The client attaches the bearer token kept in the
auth store, decodes JSON bodies and turns HTTP failures into the
:class:`BackendError` hierarchy so that views only need to deal with one
family of exceptions:

* :class:`BackendUnavailable` – the API could not be reached at all.
* :class:`SessaoExpirada` – the API answered 401 outside the login routes,
  meaning the stored token is no longer accepted.
* :class:`BackendError` – any other 4xx/5xx answer, carrying the
  ``message`` and per-field ``errors`` from the API error body.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from django.conf import settings
from prometheus_client import Counter

logger = logging.getLogger(__name__)

BACKEND_REQUESTS = Counter(
    'infocare_backend_requests_total',
    'Requests sent from the portal to the InfoCare API',
    ['method', 'outcome'],
)

LOGIN_PATHS = ('/profissionais/login', '/familiares/login')


class BackendError(Exception):
    """An error answer (or no answer) from the InfoCare API."""

    default_message = 'Ocorreu um erro. Tente novamente.'

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None,
                 errors: Optional[list[dict]] = None):
        self.message = message or self.default_message
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(self.message)

    @classmethod
    def from_response(cls, resp: requests.Response) -> 'BackendError':
        message = None
        errors: list[dict] = []
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get('message')
            if isinstance(body.get('errors'), list):
                errors = [e for e in body['errors'] if isinstance(e, dict)]
        return cls(message or resp.reason or None, status_code=resp.status_code, errors=errors)

    def field_errors(self) -> dict[str, list[str]]:
        """Group the API's ``[{campo, mensagem}]`` list by field name."""
        grouped: dict[str, list[str]] = {}
        for e in self.errors:
            campo = e.get('campo') or 'non_field_errors'
            grouped.setdefault(campo, []).append(e.get('mensagem') or '')
        return grouped


class SessaoExpirada(BackendError):
    default_message = 'Sua sessão expirou. Faça login novamente.'


class BackendUnavailable(BackendError):
    default_message = 'Falha ao conectar com o servidor.'


class BackendClient:
    """Thin wrapper around ``requests.Session`` bound to one API token."""

    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = (base_url or settings.INFOCARE_API_URL).rstrip('/')
        self.token = token
        self.timeout = timeout or settings.INFOCARE_API_TIMEOUT
        self.session = session or requests.Session()

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return self.session.request(method, self.url(path), headers=headers, timeout=self.timeout, **kwargs)

    def request(self, method: str, path: str, *, params: Optional[dict] = None,
                json: Any = None, files: Optional[dict] = None) -> Any:
        method = method.upper()
        logger.debug('API %s %s params=%s', method, path, params)
        try:
            resp = self._send(method, path, params=params, json=json, files=files)
        except requests.RequestException as e:
            BACKEND_REQUESTS.labels(method=method, outcome='unavailable').inc()
            logger.warning('API %s %s unreachable: %s', method, path, e)
            raise BackendUnavailable(status_code=None) from e

        if resp.status_code == 401 and not path.rstrip('/').endswith(LOGIN_PATHS):
            BACKEND_REQUESTS.labels(method=method, outcome='expired').inc()
            logger.info('API %s %s answered 401, session expired', method, path)
            raise SessaoExpirada(status_code=401)
        if resp.status_code >= 400:
            BACKEND_REQUESTS.labels(method=method, outcome='error').inc()
            err = BackendError.from_response(resp)
            logger.warning('API %s %s failed (%s): %s', method, path, resp.status_code, err.message)
            raise err

        BACKEND_REQUESTS.labels(method=method, outcome='ok').inc()
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            logger.warning('API %s %s returned a non-JSON body', method, path)
            raise BackendError('Resposta inválida do servidor.', status_code=resp.status_code) from e

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request('GET', path, params=params)

    def post(self, path: str, json: Any = None, files: Optional[dict] = None) -> Any:
        return self.request('POST', path, json=json, files=files)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request('PUT', path, json=json)

    def delete(self, path: str) -> Any:
        return self.request('DELETE', path)

    def ping(self) -> bool:
        """Return True when the API answers at all (any HTTP status)."""
        try:
            self._send('GET', '/')
        except requests.RequestException:
            return False
        return True
