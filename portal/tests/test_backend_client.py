import pytest
import requests

from portal.services.backend import BackendClient, BackendError, BackendUnavailable, SessaoExpirada


def test_sends_bearer_token_and_decodes_json(backend):
    backend.add('GET', '/pacientes', [{'id': 1, 'nome': 'Maria'}])
    data = BackendClient(token='abc').get('/pacientes')
    assert data == [{'id': 1, 'nome': 'Maria'}]
    call = backend.calls_to('GET', '/pacientes')[0]
    assert call.headers['Authorization'] == 'Bearer abc'


def test_anonymous_client_sends_no_authorization(backend):
    backend.add('POST', '/familiares', {'id': 3}, status=201)
    BackendClient().post('/familiares', json={'nome': 'Ana'})
    assert 'Authorization' not in backend.calls[0].headers


def test_401_outside_login_means_expired_session(backend):
    backend.add('GET', '/profissionais/me', {'message': 'Token inválido'}, status=401)
    with pytest.raises(SessaoExpirada) as exc:
        BackendClient(token='velho').get('/profissionais/me')
    assert exc.value.status_code == 401


def test_401_on_login_is_a_plain_error_with_api_message(backend):
    backend.add('POST', '/familiares/login', {'message': 'E-mail ou senha inválidos.'}, status=401)
    with pytest.raises(BackendError) as exc:
        BackendClient().post('/familiares/login', json={'email': 'a@b.com', 'senha': 'x'})
    assert not isinstance(exc.value, SessaoExpirada)
    assert exc.value.message == 'E-mail ou senha inválidos.'


def test_field_errors_are_grouped(backend):
    backend.add('POST', '/pacientes', {
        'message': 'Dados inválidos',
        'status': 'error',
        'errors': [{'campo': 'cpf', 'mensagem': 'CPF já cadastrado.'}, {'campo': 'nome', 'mensagem': 'Curto.'}],
    }, status=400)
    with pytest.raises(BackendError) as exc:
        BackendClient(token='t').post('/pacientes', json={})
    assert exc.value.status_code == 400
    assert exc.value.field_errors() == {'cpf': ['CPF já cadastrado.'], 'nome': ['Curto.']}


def test_error_without_json_body_falls_back_to_reason(backend):
    backend.add('GET', '/internacoes', '<html>boom</html>', status=500)
    with pytest.raises(BackendError) as exc:
        BackendClient(token='t').get('/internacoes')
    assert exc.value.message == 'Internal Server Error'


def test_connection_error_is_unavailable(backend):
    backend.add('GET', '/pacientes', exc=requests.ConnectionError('refused'))
    with pytest.raises(BackendUnavailable) as exc:
        BackendClient(token='t').get('/pacientes')
    assert exc.value.message == 'Falha ao conectar com o servidor.'


def test_empty_body_returns_none(backend):
    backend.add('DELETE', '/pacientes/4', None, status=204)
    assert BackendClient(token='t').delete('/pacientes/4') is None


def test_non_json_success_is_an_error(backend):
    backend.add('GET', '/pacientes', 'not json')
    with pytest.raises(BackendError) as exc:
        BackendClient(token='t').get('/pacientes')
    assert exc.value.message == 'Resposta inválida do servidor.'


def test_base_url_and_timeout_come_from_settings(settings, backend):
    settings.INFOCARE_API_URL = 'http://api.infocare.test/v1'
    backend.add('GET', '/v1/pacientes', [])
    client = BackendClient(token='t')
    assert client.url('/pacientes') == 'http://api.infocare.test/v1/pacientes'
    client.get('/pacientes')
    assert backend.calls[0].kwargs['timeout'] == settings.INFOCARE_API_TIMEOUT
