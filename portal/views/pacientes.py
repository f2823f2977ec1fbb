"""
Patient pages for healthcare professionals.

List and create share ``/profissional/pacientes``; the detail page lists
the patient's admissions.  Edit and delete are separate POST targets.
"""
from __future__ import annotations

from django.shortcuts import redirect
from rest_framework.decorators import api_view, permission_classes, renderer_classes

from ..permissions import IsProfissional
from ..renderers import PortalHTMLRenderer
from ..serializers.fields import TIPOS_SANGUINEOS
from ..serializers.pacientes import PacienteSerializer
from ..services import pacientes, notify
from ..services.audit import log_action
from ..services.backend import BackendError, SessaoExpirada
from .common import page, form_errors, backend_status


def _lista(request, form=None, errors=None, http_status=200):
    return page('portal/profissional/pacientes.html', {
        'pacientes': pacientes.listar(request.portal),
        'form': form or {},
        'errors': errors or {},
        'tipos_sanguineos': TIPOS_SANGUINEOS,
    }, http_status)


@api_view(['GET', 'POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def lista_pacientes(request):
    if request.method == 'GET':
        return _lista(request)

    ser = PacienteSerializer(data=request.data)
    if not ser.is_valid():
        return _lista(request, request.data, form_errors(ser.errors), 400)
    try:
        paciente = pacientes.criar(request.portal, ser.validated_data)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao criar paciente', e)
        return _lista(request, request.data, form_errors(e), backend_status(e))
    log_action(usuario=request.user, action='paciente.create', object_type='paciente', object_id=paciente.get('id'))
    notify.success(request, 'Paciente criado com sucesso!', f"{paciente.get('nome', '')} foi adicionado.")
    return redirect('pacientes')


@api_view(['GET'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def detalhe_paciente(request, pk: int):
    return page('portal/profissional/paciente_detalhe.html', {'paciente': pacientes.obter(request.portal, pk)})


@api_view(['GET', 'POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def editar_paciente(request, pk: int):
    ctx = request.portal
    template = 'portal/profissional/paciente_form.html'
    if request.method == 'GET':
        paciente = pacientes.obter(ctx, pk)
        return page(template, {'paciente': paciente, 'form': paciente, 'errors': {},
                               'tipos_sanguineos': TIPOS_SANGUINEOS})

    ser = PacienteSerializer(data=request.data, partial=True)
    if not ser.is_valid():
        return page(template, {'paciente': pacientes.obter(ctx, pk), 'form': request.data,
                               'errors': form_errors(ser.errors), 'tipos_sanguineos': TIPOS_SANGUINEOS}, 400)
    try:
        pacientes.atualizar(ctx, pk, ser.validated_data)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao atualizar paciente', e)
        return page(template, {'paciente': pacientes.obter(ctx, pk), 'form': request.data,
                               'errors': form_errors(e), 'tipos_sanguineos': TIPOS_SANGUINEOS},
                    backend_status(e))
    log_action(usuario=request.user, action='paciente.update', object_type='paciente', object_id=pk,
               detail={'campos': sorted(ser.validated_data)})
    notify.success(request, 'Paciente atualizado com sucesso!')
    return redirect('paciente', pk=pk)


@api_view(['POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def excluir_paciente(request, pk: int):
    try:
        pacientes.excluir(request.portal, pk)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao excluir paciente', e)
        return redirect('paciente', pk=pk)
    log_action(usuario=request.user, action='paciente.delete', object_type='paciente', object_id=pk)
    notify.success(request, 'Paciente excluído com sucesso.')
    return redirect('pacientes')
