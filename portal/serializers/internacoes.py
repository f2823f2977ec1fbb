from rest_framework import serializers

from ..services.internacoes import STATUS_INTERNACAO, TODAS
from .fields import TextoField, sem_vazios

CAMPOS_OPCIONAIS = ('diagnostico', 'observacoes', 'quarto', 'leito')
BUSCA_MAX = 120


def _opcional(max_length):
    return TextoField(required=False, allow_blank=True, max_length=max_length)


class InternacaoCreateSerializer(serializers.Serializer):
    idPaciente = serializers.IntegerField(min_value=1, error_messages={
        'required': 'Selecione um paciente.',
        'invalid': 'Selecione um paciente.',
        'null': 'Selecione um paciente.',
        'min_value': 'Selecione um paciente.',
    })
    idProfissionalResponsavel = serializers.IntegerField(min_value=1, required=False)
    diagnostico = _opcional(2000)
    observacoes = _opcional(2000)
    quarto = _opcional(32)
    leito = _opcional(32)

    def validate(self, attrs):
        attrs = sem_vazios(attrs, CAMPOS_OPCIONAIS)
        usuario = self.context.get('usuario')
        if 'idProfissionalResponsavel' not in attrs and usuario is not None:
            attrs['idProfissionalResponsavel'] = usuario.id
        return attrs


class InternacaoUpdateSerializer(serializers.Serializer):
    diagnostico = _opcional(2000)
    observacoes = _opcional(2000)
    quarto = _opcional(32)
    leito = _opcional(32)

    def validate(self, attrs):
        # cleared fields must reach the API as null to be erased
        return {campo: (attrs.get(campo) or None) for campo in CAMPOS_OPCIONAIS}


class EvolucaoSerializer(serializers.Serializer):
    descricao = TextoField(min_length=5, max_length=5000, error_messages={
        'min_length': 'A descrição deve ter pelo menos 5 caracteres.',
        'blank': 'A descrição deve ter pelo menos 5 caracteres.',
        'required': 'A descrição deve ter pelo menos 5 caracteres.',
    })


class InternacaoFiltroSerializer(serializers.Serializer):
    status = serializers.CharField(required=False, allow_blank=True)
    q = serializers.CharField(required=False, allow_blank=True)

    def validate_status(self, v):
        v = (v or '').upper()
        return v if v in STATUS_INTERNACAO + (TODAS,) else 'ATIVA'

    def validate(self, attrs):
        attrs.setdefault('status', 'ATIVA')
        attrs['q'] = (attrs.get('q') or '').strip()[:BUSCA_MAX]
        return attrs

    @classmethod
    def ler(cls, dados) -> dict:
        """Validated filter; unreadable input falls back to the defaults."""
        filtro = cls(data=dados)
        if filtro.is_valid():
            return filtro.validated_data
        return {'status': 'ATIVA', 'q': ''}
