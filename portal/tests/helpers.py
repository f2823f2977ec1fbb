import http.client
import json
from dataclasses import dataclass, field
from urllib.parse import urlsplit

import requests
from django.contrib.messages import get_messages
from rest_framework.test import APIClient

from portal.services import auth_store


@dataclass
class Call:
    method: str
    path: str
    kwargs: dict = field(default_factory=dict)

    @property
    def json(self):
        return self.kwargs.get('json')

    @property
    def params(self):
        return self.kwargs.get('params') or {}

    @property
    def headers(self):
        return self.kwargs.get('headers') or {}


class FakeBackend:
    """Stand-in for the InfoCare API answering from a route table."""

    def __init__(self):
        self.routes = {}
        self.calls: list[Call] = []

    def add(self, method, path, body=None, status=200, exc=None):
        self.routes[(method.upper(), path)] = (status, body, exc)

    def calls_to(self, method, path):
        return [c for c in self.calls if c.method == method.upper() and c.path == path]

    def handle(self, method, url, **kwargs):
        path = urlsplit(url).path
        self.calls.append(Call(method.upper(), path, kwargs))
        status, body, exc = self.routes.get((method.upper(), path), (404, {'message': 'Recurso não encontrado.'}, None))
        if exc is not None:
            raise exc
        resp = requests.Response()
        resp.status_code = status
        resp.reason = http.client.responses.get(status, '')
        resp.url = url
        if isinstance(body, (bytes, str)):
            resp._content = body.encode() if isinstance(body, str) else body
            resp.headers['Content-Type'] = 'text/html'
        else:
            resp._content = json.dumps(body).encode() if body is not None else b''
            resp.headers['Content-Type'] = 'application/json'
        return resp


def logged_client(usuario, token='tok-123'):
    """APIClient whose session already holds ``usuario`` and ``token``."""
    client = APIClient()
    session = client.session
    session[auth_store.SESSION_KEY] = {'token': token, 'usuario': usuario.as_dict()}
    session.save()
    return client


def mensagens(resp):
    return [str(m) for m in get_messages(resp.wsgi_request)]
