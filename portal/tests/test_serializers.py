from django.core.files.uploadedfile import SimpleUploadedFile

from portal.serializers.associacoes import AssociacaoCreateSerializer, AssociacaoFiltroSerializer
from portal.serializers.auth import LoginSerializer, FamiliarCreateSerializer
from portal.serializers.fields import mascara_cpf, mascara_telefone
from portal.serializers.internacoes import (
    InternacaoCreateSerializer,
    InternacaoUpdateSerializer,
    EvolucaoSerializer,
    InternacaoFiltroSerializer,
)
from portal.serializers.pacientes import PacienteSerializer
from portal.serializers.perfis import ProfissionalPerfilSerializer
from portal.serializers.transcricao import TranscricaoSerializer


def test_masks():
    assert mascara_cpf('12345678901') == '123.456.789-01'
    assert mascara_cpf('123.456.789-01') == '123.456.789-01'
    assert mascara_cpf('1234') == '123.4'
    assert mascara_telefone('11987654321') == '(11) 98765-4321'
    assert mascara_telefone('(11) 98765-4321') == '(11) 98765-4321'


def test_login_messages():
    ser = LoginSerializer(data={'email': 'nao-e-email', 'senha': '123', 'tipoUsuario': 'admin'})
    assert not ser.is_valid()
    assert ser.errors['email'] == ['Por favor, insira um email válido.']
    assert ser.errors['senha'] == ['A senha deve ter pelo menos 6 caracteres.']
    assert ser.errors['tipoUsuario'] == ['Você deve selecionar um tipo de usuário.']


def test_registration_masks_and_drops_confirmation():
    ser = FamiliarCreateSerializer(data={
        'nome': 'Carlos Lima', 'cpf': '12345678901', 'email': 'c@x.com',
        'telefone': '', 'senha': 'segredo1', 'confirmarSenha': 'segredo1',
    })
    assert ser.is_valid(), ser.errors
    assert ser.validated_data == {'nome': 'Carlos Lima', 'cpf': '123.456.789-01', 'email': 'c@x.com',
                                  'senha': 'segredo1'}


def test_registration_short_cpf_and_password_mismatch():
    dados = {'nome': 'Carlos', 'cpf': '12345678901', 'email': 'c@x.com', 'senha': 'segredo1',
             'confirmarSenha': 'outra123'}
    ser = FamiliarCreateSerializer(data=dict(dados, cpf='123'))
    assert not ser.is_valid()
    assert ser.errors['cpf'] == ['CPF deve estar no formato xxx.xxx.xxx-xx']
    # field errors stop validate(), so the mismatch shows once the CPF is fixed
    ser = FamiliarCreateSerializer(data=dados)
    assert not ser.is_valid()
    assert ser.errors['confirmarSenha'] == ['As senhas não coincidem.']


def test_paciente_date_is_sent_as_utc_midnight():
    ser = PacienteSerializer(data={'nome': 'Maria <b>Silva</b>', 'cpf': '98765432100', 'dataNascimento': '1950-03-12',
                                   'tipoSanguineo': 'O+', 'telefone': '11912345678'})
    assert ser.is_valid(), ser.errors
    assert ser.validated_data['nome'] == 'Maria Silva'
    assert ser.validated_data['dataNascimento'] == '1950-03-12T00:00:00.000Z'
    assert ser.validated_data['telefone'] == '(11) 91234-5678'


def test_paciente_rejects_bad_date_and_blood_type():
    ser = PacienteSerializer(data={'nome': 'Maria', 'cpf': '98765432100', 'dataNascimento': '12/03/1950',
                                   'tipoSanguineo': 'C+'})
    assert not ser.is_valid()
    assert ser.errors['dataNascimento'] == ['Formato de data inválido.']
    assert 'tipoSanguineo' in ser.errors
    ser = PacienteSerializer(data={'nome': 'Maria', 'cpf': '98765432100', 'dataNascimento': '1950-02-30'})
    assert not ser.is_valid()
    assert ser.errors['dataNascimento'] == ['Por favor, insira uma data válida.']


def test_paciente_partial_update_omits_blank_optionals():
    ser = PacienteSerializer(data={'nome': 'Maria Silva', 'tipoSanguineo': '', 'telefone': ''}, partial=True)
    assert ser.is_valid(), ser.errors
    assert ser.validated_data == {'nome': 'Maria Silva'}


def test_internacao_create_defaults_responsavel(profissional):
    ser = InternacaoCreateSerializer(data={'idPaciente': '3', 'diagnostico': 'Pneumonia', 'quarto': ''},
                                     context={'usuario': profissional})
    assert ser.is_valid(), ser.errors
    assert ser.validated_data == {'idPaciente': 3, 'diagnostico': 'Pneumonia', 'idProfissionalResponsavel': 1}


def test_internacao_create_requires_patient():
    ser = InternacaoCreateSerializer(data={'idPaciente': ''})
    assert not ser.is_valid()
    assert ser.errors['idPaciente'] == ['Selecione um paciente.']


def test_internacao_update_sends_blank_as_null():
    ser = InternacaoUpdateSerializer(data={'diagnostico': 'Alterado', 'observacoes': '', 'quarto': '12'})
    assert ser.is_valid(), ser.errors
    assert ser.validated_data == {'diagnostico': 'Alterado', 'observacoes': None, 'quarto': '12', 'leito': None}


def test_evolucao_min_length():
    ser = EvolucaoSerializer(data={'descricao': 'ok'})
    assert not ser.is_valid()
    assert ser.errors['descricao'] == ['A descrição deve ter pelo menos 5 caracteres.']


def test_associacao_requires_positive_id():
    ser = AssociacaoCreateSerializer(data={'idInternacao': 0})
    assert not ser.is_valid()
    assert ser.errors['idInternacao'] == ['O ID da internação é obrigatório.']
    assert AssociacaoCreateSerializer(data={'idInternacao': '12'}).is_valid()


def test_filters_fall_back_to_defaults():
    f = InternacaoFiltroSerializer(data={'status': 'qualquer', 'q': '  maria '})
    assert f.is_valid()
    assert f.validated_data == {'status': 'ATIVA', 'q': 'maria'}
    f = InternacaoFiltroSerializer(data={'status': 'TODAS'})
    assert f.is_valid() and f.validated_data['status'] == 'TODAS'
    f = AssociacaoFiltroSerializer(data={})
    assert f.is_valid() and f.validated_data['status'] == 'pendente'
    f = AssociacaoFiltroSerializer(data={'status': 'aprovada'})
    assert f.is_valid() and f.validated_data['status'] == 'aprovada'


def test_profissional_profile_especialidade_enum():
    ser = ProfissionalPerfilSerializer(data={'nome': 'Ana Souza', 'email': 'a@h.com', 'especialidade': 'CIRURGIAO'})
    assert not ser.is_valid()
    assert 'especialidade' in ser.errors
    ser = ProfissionalPerfilSerializer(data={'nome': 'Ana Souza', 'email': 'a@h.com', 'especialidade': 'MEDICO',
                                             'crm': '12345-SP', 'coren': ''})
    assert ser.is_valid(), ser.errors
    assert ser.validated_data == {'nome': 'Ana Souza', 'email': 'a@h.com', 'especialidade': 'MEDICO', 'crm': '12345-SP'}


def test_transcricao_upload_rules(settings):
    ok = TranscricaoSerializer(data={'audio': SimpleUploadedFile('a.webm', b'\x1a\x45', content_type='audio/webm')})
    assert ok.is_valid(), ok.errors

    texto = TranscricaoSerializer(data={'audio': SimpleUploadedFile('a.txt', b'oi', content_type='text/plain')})
    assert not texto.is_valid()
    assert texto.errors['audio'] == ['Formato de áudio não suportado.']

    settings.UPLOAD_MAX_MB = 0
    grande = TranscricaoSerializer(data={'audio': SimpleUploadedFile('a.webm', b'xx', content_type='audio/webm')})
    assert not grande.is_valid()
    assert 'audio' in grande.errors


def test_filters_never_reject_input():
    assert InternacaoFiltroSerializer.ler({'status': 'alta', 'q': ' x' * 100}) == {'status': 'ALTA', 'q': 'x ' * 60}
    assert InternacaoFiltroSerializer.ler({'status': 'ALTA', 'q': '\x00'}) == {'status': 'ATIVA', 'q': ''}
    assert AssociacaoFiltroSerializer.ler({'status': 'aprovada'}) == 'aprovada'
    assert AssociacaoFiltroSerializer.ler({'status': '\x00'}) == 'pendente'
