"""
Dictation support: forward recorded audio to the API's speech-to-text.

The browser records the clip; the portal only relays it (the token stays
server side) and merges the returned text into the field being edited.
"""
from __future__ import annotations

from .context import PortalContext


def transcrever(ctx: PortalContext, audio) -> str:
    """Send ``audio`` (an uploaded file) as multipart field ``audio``."""
    content_type = getattr(audio, 'content_type', None) or 'audio/webm'
    name = getattr(audio, 'name', None) or 'gravacao.webm'
    data = ctx.api.post('/util/transcrever', files={'audio': (name, audio, content_type)})
    return ((data or {}).get('transcricao') or '').strip()


def anexar_transcricao(texto_atual: str, transcricao: str) -> str:
    """Append a transcription after the text already typed, one blank line apart."""
    if not (texto_atual or '').strip():
        return transcricao
    return f'{texto_atual}\n\n{transcricao}'
