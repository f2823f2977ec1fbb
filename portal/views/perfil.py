"""
Home pages of both roles: the logged-in user's profile and its edit form.
"""
from __future__ import annotations

from django.shortcuts import redirect
from rest_framework.decorators import api_view, permission_classes, renderer_classes

from ..permissions import IsProfissional, IsFamiliar
from ..renderers import PortalHTMLRenderer
from ..serializers.perfis import ProfissionalPerfilSerializer, FamiliarPerfilSerializer
from ..services import profissionais, familiares, notify
from ..services.audit import log_action
from ..services.backend import BackendError, SessaoExpirada
from .common import page, form_errors, backend_status


def _perfil(request, *, template, servico, serializer_class):
    ctx = request.portal
    if request.method == 'GET':
        perfil = servico.obter_me(ctx)
        return page(template, {'perfil': perfil, 'form': perfil, 'errors': {},
                               'especialidades': profissionais.ESPECIALIDADES})

    ser = serializer_class(data=request.data)
    if not ser.is_valid():
        return page(template, {'perfil': servico.obter_me(ctx), 'form': request.data,
                               'errors': form_errors(ser.errors),
                               'especialidades': profissionais.ESPECIALIDADES}, 400)
    try:
        servico.atualizar_me(ctx, ser.validated_data)
    except SessaoExpirada:
        raise
    except BackendError as e:
        notify.error(request, 'Erro ao atualizar perfil', e)
        return page(template, {'perfil': servico.obter_me(ctx), 'form': request.data, 'errors': form_errors(e),
                               'especialidades': profissionais.ESPECIALIDADES}, backend_status(e))
    log_action(usuario=ctx.usuario, action='perfil.update', object_type=ctx.usuario.tipo, object_id=ctx.usuario.id)
    notify.success(request, 'Perfil atualizado com sucesso!')
    return redirect(request.path)


@api_view(['GET', 'POST'])
@permission_classes([IsProfissional])
@renderer_classes([PortalHTMLRenderer])
def profissional_home(request):
    return _perfil(request, template='portal/profissional/home.html', servico=profissionais,
                   serializer_class=ProfissionalPerfilSerializer)


@api_view(['GET', 'POST'])
@permission_classes([IsFamiliar])
@renderer_classes([PortalHTMLRenderer])
def familiar_home(request):
    return _perfil(request, template='portal/familiar/home.html', servico=familiares,
                   serializer_class=FamiliarPerfilSerializer)
