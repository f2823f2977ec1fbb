"""
Admission pages for healthcare professionals.

``/profissional/internacoes`` lists admissions filtered by status on the
API and by patient name locally, and hosts the create form.  The detail
page shows the progress notes and the new-note form with dictation.
"""
from __future__ import annotations

from django.shortcuts import redirect
from rest_framework.decorators import api_view, permission_classes, renderer_classes

from ..permissions import IsProfissional
from ..renderers import PortalHTMLRenderer
from ..serializers.internacoes import (
    InternacaoCreateSerializer,
    InternacaoUpdateSerializer,
    EvolucaoSerializer,
    InternacaoFiltroSerializer,
)
from ..services import internacoes, evolucoes, pacientes, notify
from ..services.audit import log_action
from ..services.backend import BackendError, SessaoExpirada
from .common import page, form_errors, backend_status, back_to


def _lista(request, form=None, errors=None, http_status=200):
    filtro = InternacaoFiltroSerializer.ler(request.query_params)
    status_ = filtro['status']
    termo = filtro['q']
    ctx = request.portal
    return page('portal/profissional/internacoes.html', {
        'internacoes': internacoes.filtrar_por_paciente(internacoes.listar(ctx, status_), termo),
        'status': status_,
        'q': termo,
        'pacientes': pacientes.listar(ctx),
        'form': form or {},
        'errors': errors or {},
    }, http_status)


@api_view(['GET', 'POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def lista_internacoes(request):
    if request.method == 'GET':
        return _lista(request)

    ser = InternacaoCreateSerializer(data=request.data, context={'usuario': request.user})
    if not ser.is_valid():
        return _lista(request, request.data, form_errors(ser.errors), 400)
    try:
        internacao = internacoes.criar(request.portal, ser.validated_data)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao criar internação', e)
        return _lista(request, request.data, form_errors(e), backend_status(e))
    log_action(usuario=request.user, action='internacao.create', object_type='internacao',
               object_id=internacao.get('id'), detail={'idPaciente': ser.validated_data['idPaciente']})
    notify.success(request, 'Internação criada com sucesso!', 'A internação foi registrada.')
    return redirect('internacoes')


def _detalhe(request, pk, form=None, errors=None, http_status=200):
    return page('portal/profissional/internacao_detalhe.html', {
        'internacao': internacoes.obter(request.portal, pk),
        'form': form or {},
        'errors': errors or {},
    }, http_status)


@api_view(['GET'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def detalhe_internacao(request, pk: int):
    return _detalhe(request, pk)


@api_view(['GET', 'POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def editar_internacao(request, pk: int):
    ctx = request.portal
    template = 'portal/profissional/internacao_form.html'
    if request.method == 'GET':
        internacao = internacoes.obter(ctx, pk)
        return page(template, {'internacao': internacao, 'form': internacao, 'errors': {}})

    ser = InternacaoUpdateSerializer(data=request.data)
    if not ser.is_valid():
        return page(template, {'internacao': internacoes.obter(ctx, pk), 'form': request.data,
                               'errors': form_errors(ser.errors)}, 400)
    try:
        internacoes.atualizar(ctx, pk, ser.validated_data)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao atualizar internação', e)
        return page(template, {'internacao': internacoes.obter(ctx, pk), 'form': request.data,
                               'errors': form_errors(e)}, backend_status(e))
    log_action(usuario=request.user, action='internacao.update', object_type='internacao', object_id=pk)
    notify.success(request, 'Internação atualizada com sucesso!')
    return redirect('internacao', pk=pk)


@api_view(['POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def alta_internacao(request, pk: int):
    try:
        internacoes.dar_alta(request.portal, pk)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao registrar alta', e)
        return redirect('internacao', pk=pk)
    log_action(usuario=request.user, action='internacao.alta', object_type='internacao', object_id=pk)
    notify.success(request, 'Alta registrada com sucesso!', 'O paciente recebeu alta e a internação foi finalizada.')
    return redirect('internacao', pk=pk)


@api_view(['POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def excluir_internacao(request, pk: int):
    try:
        internacoes.excluir(request.portal, pk)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao excluir internação', e)
        return redirect('internacao', pk=pk)
    log_action(usuario=request.user, action='internacao.delete', object_type='internacao', object_id=pk)
    notify.success(request, 'Internação excluída com sucesso.')
    return back_to('/profissional/internacoes', status=request.query_params.get('status'))


@api_view(['POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def nova_evolucao(request, pk: int):
    ser = EvolucaoSerializer(data=request.data)
    if not ser.is_valid():
        return _detalhe(request, pk, request.data, form_errors(ser.errors), 400)
    try:
        evolucao = evolucoes.criar(request.portal, pk, ser.validated_data['descricao'])
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao salvar evolução', e)
        return _detalhe(request, pk, request.data, form_errors(e), backend_status(e))
    log_action(usuario=request.user, action='evolucao.create', object_type='internacao', object_id=pk,
               detail={'idEvolucao': (evolucao or {}).get('id')})
    notify.success(request, 'Evolução registrada com sucesso!', 'O prontuário foi atualizado.')
    return redirect('internacao', pk=pk)
