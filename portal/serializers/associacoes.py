from rest_framework import serializers

from ..services.associacoes import STATUS_ASSOCIACAO, PENDENTE, TODAS


class AssociacaoCreateSerializer(serializers.Serializer):
    idInternacao = serializers.IntegerField(min_value=1, error_messages={
        'invalid': 'O ID deve ser um número.',
        'required': 'O ID da internação é obrigatório.',
        'null': 'O ID da internação é obrigatório.',
        'min_value': 'O ID da internação é obrigatório.',
    })


class AssociacaoFiltroSerializer(serializers.Serializer):
    status = serializers.CharField(required=False, allow_blank=True)

    def validate_status(self, v):
        if v == TODAS or v in STATUS_ASSOCIACAO:
            return v
        return PENDENTE

    def validate(self, attrs):
        attrs.setdefault('status', PENDENTE)
        return attrs

    @classmethod
    def ler(cls, dados) -> str:
        """Validated status; unreadable input falls back to ``pendente``."""
        filtro = cls(data={'status': dados.get('status', '')})
        if filtro.is_valid():
            return filtro.validated_data['status']
        return PENDENTE
