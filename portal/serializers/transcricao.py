from django.conf import settings
from rest_framework import serializers


class TranscricaoSerializer(serializers.Serializer):
    audio = serializers.FileField(allow_empty_file=False, error_messages={
        'required': 'Nenhum áudio foi enviado.',
        'empty': 'O áudio enviado está vazio.',
    })
    textoAtual = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate_audio(self, f):
        tipos = [t.strip() for t in settings.ALLOWED_UPLOAD_TYPES if t.strip()]
        content_type = (getattr(f, 'content_type', '') or '').split(';')[0].strip()
        # entries ending in '/' are type prefixes, the rest exact matches
        if not any(content_type.startswith(t) if t.endswith('/') else content_type == t for t in tipos):
            raise serializers.ValidationError('Formato de áudio não suportado.')
        if f.size > settings.UPLOAD_MAX_MB * 1024 * 1024:
            raise serializers.ValidationError(f'O áudio excede o limite de {settings.UPLOAD_MAX_MB} MB.')
        return f
