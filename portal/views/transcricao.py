"""
JSON endpoint used by the dictation widget (``static/portal/ditado.js``).
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.response import Response

from ..permissions import IsProfissional
from ..serializers.transcricao import TranscricaoSerializer
from ..services import transcricao
from ..services.audit import log_action
from ..throttling import TranscricaoRateThrottle


@api_view(['POST'])
@permission_classes([IsProfissional])
@throttle_classes([TranscricaoRateThrottle])
def transcrever(request):
    """Relay the recorded clip to the API and merge the text into ``textoAtual``.

    API failures are left to the exception handler, which answers with the
    API's status (502 when it cannot be reached).
    """
    ser = TranscricaoSerializer(data=request.data)
    ser.is_valid(raise_exception=True)
    audio = ser.validated_data['audio']
    texto = transcricao.transcrever(request.portal, audio)
    log_action(usuario=request.user, action='transcricao', detail={'bytes': audio.size, 'chars': len(texto)})
    return Response({
        'ok': True,
        'transcricao': texto,
        'texto': transcricao.anexar_transcricao(ser.validated_data.get('textoAtual', ''), texto),
    })
