"""
Pages of the familiar role.

A familiar asks to follow an admission by its ID; once a professional
approves the request, the admission and its progress notes become
visible under ``/familiar/internacoes``.
"""
from __future__ import annotations

from django.shortcuts import redirect
from rest_framework.decorators import api_view, permission_classes, renderer_classes

from ..permissions import IsFamiliar
from ..renderers import PortalHTMLRenderer
from ..serializers.associacoes import AssociacaoCreateSerializer, AssociacaoFiltroSerializer
from ..serializers.internacoes import InternacaoFiltroSerializer
from ..services import associacoes, notify
from ..services.audit import log_action
from ..services.backend import BackendError, SessaoExpirada
from .common import page, form_errors, backend_status


def _associacoes(request, form=None, errors=None, http_status=200):
    status_ = AssociacaoFiltroSerializer.ler(request.query_params)
    return page('portal/familiar/associacoes.html', {
        'associacoes': associacoes.listar_minhas(request.portal, status_),
        'status': status_,
        'form': form or {},
        'errors': errors or {},
    }, http_status)


@api_view(['GET', 'POST'])
@permission_classes([IsFamiliar])
@renderer_classes([PortalHTMLRenderer])
def minhas_associacoes(request):
    if request.method == 'GET':
        return _associacoes(request)

    ser = AssociacaoCreateSerializer(data=request.data)
    if not ser.is_valid():
        return _associacoes(request, request.data, form_errors(ser.errors), 400)
    try:
        associacao = associacoes.criar(request.portal, ser.validated_data['idInternacao'])
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao enviar solicitação', e)
        return _associacoes(request, request.data, form_errors(e), backend_status(e))
    log_action(usuario=request.user, action='associacao.create', object_type='associacao',
               object_id=(associacao or {}).get('id'), detail={'idInternacao': ser.validated_data['idInternacao']})
    notify.success(request, 'Solicitação enviada com sucesso!', 'Sua solicitação está pendente de aprovação.')
    return redirect('minhas_associacoes')


@api_view(['GET'])
@permission_classes([IsFamiliar])
@renderer_classes([PortalHTMLRenderer])
def minhas_internacoes(request):
    status_ = InternacaoFiltroSerializer.ler(request.query_params)['status']
    return page('portal/familiar/internacoes.html', {
        'associacoes': associacoes.internacoes_aprovadas(request.portal, status_),
        'status': status_,
    })


@api_view(['GET'])
@permission_classes([IsFamiliar])
@renderer_classes([PortalHTMLRenderer])
def minha_internacao(request, pk: int):
    associacao = associacoes.obter_minha(request.portal, pk)
    if associacao.get('status') != associacoes.APROVADA:
        notify.info(request, 'Acesso indisponível', 'Esta solicitação ainda não foi aprovada.')
        return redirect('minhas_internacoes')
    return page('portal/familiar/internacao_detalhe.html', {'associacao': associacao,
                                                            'internacao': associacao.get('internacao') or {}})
