import pytest
from rest_framework import status

from portal.services import auth_store

from .helpers import mensagens


def _associacao(id_, status_='aprovada', status_internacao='ATIVA', **extra):
    data = {'id': id_, 'idFamiliar': 7, 'idInternacao': 100 + id_, 'status': status_,
            'dataSolicitacao': '2024-05-02T12:00:00.000Z', 'dataResposta': None, 'profissionalResposta': None,
            'internacao': {'id': 100 + id_, 'diagnostico': 'Pneumonia', 'dataInicio': '2024-05-01T09:00:00.000Z',
                           'status': status_internacao, 'paciente': {'nome': f'Paciente {id_}'}}}
    data.update(extra)
    return data


@pytest.fixture
def api(backend):
    backend.add('GET', '/familiares/me', {'id': 7, 'nome': 'Carlos Lima', 'email': 'carlos@email.com',
                                          'cpf': '123.456.789-01', 'telefone': None})
    backend.add('GET', '/familiares/me/associacoes', [_associacao(1), _associacao(2, status_internacao='ALTA')])
    return backend


def test_profile_update(api, fam_client):
    api.add('PUT', '/familiares/me', {'id': 7, 'nome': 'Carlos Lima Filho', 'email': 'carlos@email.com'})
    r = fam_client.post('/familiar', {'nome': 'Carlos Lima Filho', 'email': 'carlos@email.com',
                                      'telefone': '21999998888'})
    assert r['Location'] == '/familiar'
    assert api.calls_to('PUT', '/familiares/me')[0].json == {
        'nome': 'Carlos Lima Filho', 'email': 'carlos@email.com', 'telefone': '(21) 99999-8888'}
    assert fam_client.session[auth_store.SESSION_KEY]['usuario']['nome'] == 'Carlos Lima Filho'
    assert fam_client.session[auth_store.SESSION_KEY]['token'] == 'tok-fam'


def test_profile_update_error(api, fam_client):
    api.add('PUT', '/familiares/me', {'message': 'E-mail já está em uso.'}, status=409)
    r = fam_client.post('/familiar', {'nome': 'Carlos Lima', 'email': 'outro@email.com'})
    assert r.status_code == status.HTTP_409_CONFLICT
    assert mensagens(r) == ['Erro ao atualizar perfil E-mail já está em uso.']


def test_my_requests_default_to_pending(api, fam_client):
    r = fam_client.get('/familiar/associacoes')
    assert r.status_code == 200
    assert r.data['status'] == 'pendente'
    assert api.calls_to('GET', '/familiares/me/associacoes')[0].params == {'status': 'pendente'}


def test_new_request(api, fam_client):
    fam_client.get('/familiar/associacoes')
    api.add('POST', '/associacoes', {'id': 30, 'idInternacao': 42, 'status': 'pendente'}, status=201)
    r = fam_client.post('/familiar/associacoes', {'idInternacao': '42'})
    assert r['Location'] == '/familiar/associacoes'
    assert api.calls_to('POST', '/associacoes')[0].json == {'idInternacao': 42}
    assert mensagens(r) == ['Solicitação enviada com sucesso! Sua solicitação está pendente de aprovação.']
    fam_client.get('/familiar/associacoes')
    assert len(api.calls_to('GET', '/familiares/me/associacoes')) == 2


def test_new_request_duplicate(api, fam_client):
    api.add('POST', '/associacoes', {'message': 'Você já possui uma solicitação para esta internação.'}, status=409)
    r = fam_client.post('/familiar/associacoes', {'idInternacao': '42'})
    assert r.status_code == status.HTTP_409_CONFLICT
    assert mensagens(r) == ['Erro ao enviar solicitação Você já possui uma solicitação para esta internação.']


def test_new_request_invalid_id(api, fam_client):
    r = fam_client.post('/familiar/associacoes', {'idInternacao': '0'})
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert r.data['errors']['idInternacao'] == ['O ID da internação é obrigatório.']


def test_admissions_read_only_approved_and_filter_locally(api, fam_client):
    r = fam_client.get('/familiar/internacoes')
    assert api.calls_to('GET', '/familiares/me/associacoes')[0].params == {'status': 'aprovada'}
    assert [a['id'] for a in r.data['associacoes']] == [1]

    r = fam_client.get('/familiar/internacoes?status=ALTA')
    assert [a['id'] for a in r.data['associacoes']] == [2]
    r = fam_client.get('/familiar/internacoes?status=TODAS')
    assert [a['id'] for a in r.data['associacoes']] == [1, 2]
    # one API read served all three filters
    assert len(api.calls_to('GET', '/familiares/me/associacoes')) == 1


def test_approved_admission_detail(api, fam_client):
    detalhe = _associacao(1, dataResposta='2024-05-03T09:00:00.000Z', profissionalResposta={'nome': 'Dra. Ana'})
    detalhe['internacao'].update({
        'dataAlta': None, 'observacoes': None, 'quarto': '12', 'leito': 'B',
        'profissionalResponsavel': {'nome': 'Dra. Ana'},
        'evolucoes': [{'id': 1, 'dataHora': '2024-05-03T08:00:00.000Z', 'descricao': 'Sem febre.',
                       'profissional': {'nome': 'Dra. Ana', 'tipo': 'MEDICO'}}],
    })
    api.add('GET', '/familiares/me/associacoes/1', detalhe)
    r = fam_client.get('/familiar/internacoes/1')
    assert r.status_code == 200
    body = r.content.decode()
    assert 'Sem febre.' in body
    assert 'Paciente 1' in body


def test_pending_admission_detail_redirects(api, fam_client):
    api.add('GET', '/familiares/me/associacoes/2', _associacao(2, status_='pendente'))
    r = fam_client.get('/familiar/internacoes/2')
    assert r['Location'] == '/familiar/internacoes'
    assert mensagens(r) == ['Acesso indisponível Esta solicitação ainda não foi aprovada.']
