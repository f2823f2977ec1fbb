"""
Shared form fields: bleach-cleaned text and the Brazilian input masks.
"""
import datetime
import re

import bleach
from rest_framework import serializers

TIPOS_SANGUINEOS = ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')
NOME_MIN = 'Nome deve ter no mínimo 3 caracteres.'
EMAIL_INVALIDO = 'E-mail inválido.'
SENHA_MIN = 'Senha deve ter no mínimo 6 caracteres.'


def _digitos(value):
    return re.sub(r'\D', '', value or '')


def mascara_cpf(value):
    """``12345678901`` -> ``123.456.789-01``; partial input is masked as far as it goes."""
    v = _digitos(value)
    v = re.sub(r'(\d{3})(\d)', r'\1.\2', v, count=1)
    v = re.sub(r'(\d{3})(\d)', r'\1.\2', v, count=1)
    v = re.sub(r'(\d{3})(\d{1,2})$', r'\1-\2', v, count=1)
    return v[:14]


def mascara_telefone(value):
    """``11987654321`` -> ``(11) 98765-4321``."""
    v = _digitos(value)
    v = re.sub(r'(\d{2})(\d)', r'(\1) \2', v, count=1)
    v = re.sub(r'(\d{5})(\d)', r'\1-\2', v, count=1)
    v = re.sub(r'(\d{4})-(\d)(\d{4})', r'\1\2-\3', v, count=1)
    return v[:15]


def sem_vazios(attrs, campos):
    """Drop optional fields left blank so they are not sent at all."""
    return {k: v for k, v in attrs.items() if not (k in campos and v in ('', None))}


class TextoField(serializers.CharField):
    """A CharField whose value is stripped of any markup."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return bleach.clean(value, tags=set(), strip=True)


class NomeField(TextoField):
    def __init__(self, **kwargs):
        kwargs.setdefault('min_length', 3)
        kwargs.setdefault('error_messages', {'min_length': NOME_MIN, 'blank': NOME_MIN, 'required': NOME_MIN})
        super().__init__(**kwargs)


class CpfField(serializers.CharField):
    default_error_messages = {'formato': 'CPF deve estar no formato xxx.xxx.xxx-xx'}

    def __init__(self, **kwargs):
        kwargs.setdefault('error_messages', {'blank': self.default_error_messages['formato'],
                                             'required': self.default_error_messages['formato']})
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value = mascara_cpf(super().to_internal_value(data))
        if len(value) != 14:
            self.fail('formato')
        return value


class TelefoneField(serializers.CharField):
    """Optional phone; blank stays blank and is dropped by the serializer."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_blank', True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return mascara_telefone(value) if value else ''


class DataISOField(serializers.CharField):
    """A ``YYYY-MM-DD`` date sent to the API as UTC midnight."""

    default_error_messages = {
        'obrigatoria': 'Data de nascimento é obrigatória.',
        'formato': 'Formato de data inválido.',
        'invalida': 'Por favor, insira uma data válida.',
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('error_messages', {'blank': self.default_error_messages['obrigatoria'],
                                             'required': self.default_error_messages['obrigatoria']})
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if not re.fullmatch(r'\d{4}-\d{2}-\d{2}', value):
            self.fail('formato')
        try:
            datetime.date.fromisoformat(value)
        except ValueError:
            self.fail('invalida')
        return f'{value}T00:00:00.000Z'


class EmailField(serializers.EmailField):
    def __init__(self, message=EMAIL_INVALIDO, **kwargs):
        kwargs.setdefault('error_messages', {'invalid': message, 'blank': message, 'required': message})
        super().__init__(**kwargs)
