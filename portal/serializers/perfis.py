from rest_framework import serializers

from ..services.profissionais import ESPECIALIDADES
from .fields import NomeField, TelefoneField, TextoField, EmailField, sem_vazios


class FamiliarPerfilSerializer(serializers.Serializer):
    nome = NomeField()
    email = EmailField()
    telefone = TelefoneField()

    def validate(self, attrs):
        return sem_vazios(attrs, ('telefone',))


class ProfissionalPerfilSerializer(FamiliarPerfilSerializer):
    especialidade = serializers.ChoiceField(choices=ESPECIALIDADES)
    crm = TextoField(required=False, allow_blank=True, max_length=32)
    coren = TextoField(required=False, allow_blank=True, max_length=32)

    def validate(self, attrs):
        return sem_vazios(attrs, ('telefone', 'crm', 'coren'))
