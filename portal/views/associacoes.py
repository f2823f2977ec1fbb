"""
Review of familiar access requests by healthcare professionals.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes, renderer_classes

from ..permissions import IsProfissional
from ..renderers import PortalHTMLRenderer
from ..serializers.associacoes import AssociacaoFiltroSerializer
from ..services import associacoes, notify
from ..services.audit import log_action
from ..services.backend import BackendError, SessaoExpirada
from .common import page, back_to


@api_view(['GET'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def lista_associacoes(request):
    status_ = AssociacaoFiltroSerializer.ler(request.query_params)
    return page('portal/profissional/associacoes.html', {
        'associacoes': associacoes.listar(request.portal, status_),
        'status': status_,
    })


def _decidir(request, pk, *, acao, ok, titulo_erro):
    status_ = AssociacaoFiltroSerializer.ler(request.data)
    try:
        getattr(associacoes, acao)(request.portal, pk)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, titulo_erro, e)
    else:
        log_action(usuario=request.user, action=f'associacao.{acao}', object_type='associacao', object_id=pk)
        ok(request)
    return back_to('/profissional/associacoes', status=status_)


@api_view(['POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def aprovar_associacao(request, pk: int):
    return _decidir(request, pk, acao='aprovar', titulo_erro='Erro ao aprovar solicitação',
                    ok=lambda r: notify.success(r, 'Solicitação aprovada com sucesso!'))


@api_view(['POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def rejeitar_associacao(request, pk: int):
    return _decidir(request, pk, acao='rejeitar', titulo_erro='Erro ao rejeitar solicitação',
                    ok=lambda r: notify.info(r, 'Solicitação rejeitada.'))
