from rest_framework import serializers

from ..services.auth_store import TIPOS
from .fields import NomeField, CpfField, TelefoneField, EmailField, SENHA_MIN, sem_vazios


class LoginSerializer(serializers.Serializer):
    email = EmailField(message='Por favor, insira um email válido.')
    senha = serializers.CharField(trim_whitespace=False, min_length=6, error_messages={
        'min_length': 'A senha deve ter pelo menos 6 caracteres.',
        'blank': 'A senha deve ter pelo menos 6 caracteres.',
        'required': 'A senha deve ter pelo menos 6 caracteres.',
    })
    tipoUsuario = serializers.ChoiceField(choices=TIPOS, error_messages={
        'invalid_choice': 'Você deve selecionar um tipo de usuário.',
        'required': 'Você deve selecionar um tipo de usuário.',
    })


class FamiliarCreateSerializer(serializers.Serializer):
    nome = NomeField()
    cpf = CpfField()
    email = EmailField()
    telefone = TelefoneField()
    senha = serializers.CharField(trim_whitespace=False, min_length=6, error_messages={
        'min_length': SENHA_MIN, 'blank': SENHA_MIN, 'required': SENHA_MIN,
    })
    confirmarSenha = serializers.CharField(trim_whitespace=False, allow_blank=True)

    def validate(self, attrs):
        if attrs.get('senha') != attrs.get('confirmarSenha'):
            raise serializers.ValidationError({'confirmarSenha': 'As senhas não coincidem.'})
        attrs = sem_vazios(attrs, ('telefone',))
        attrs.pop('confirmarSenha')
        return attrs
