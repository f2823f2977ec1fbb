from rest_framework import serializers

from .fields import NomeField, CpfField, TelefoneField, DataISOField, TIPOS_SANGUINEOS, sem_vazios


class PacienteSerializer(serializers.Serializer):
    """Create and (with ``partial=True``) edit a patient."""

    nome = NomeField()
    cpf = CpfField()
    dataNascimento = DataISOField()
    telefone = TelefoneField()
    tipoSanguineo = serializers.ChoiceField(choices=TIPOS_SANGUINEOS, required=False, allow_blank=True)

    def validate(self, attrs):
        return sem_vazios(attrs, ('telefone', 'tipoSanguineo'))
