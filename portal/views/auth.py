"""
Public pages: landing, login, logout and familiar self-registration.

Login and registration are anonymous (``AllowAny``); the API answers
with the token and ``usuario`` that are then kept in the auth store.
"""
from __future__ import annotations

import logging

from django.shortcuts import redirect
from rest_framework.decorators import api_view, permission_classes, renderer_classes, throttle_classes
from rest_framework.permissions import AllowAny

from ..renderers import PortalHTMLRenderer
from ..serializers.auth import LoginSerializer, FamiliarCreateSerializer
from ..services import auth_store, familiares, notify
from ..services.audit import log_action
from ..services.auth import autenticar
from ..services.backend import BackendError
from ..throttling import LoginRateThrottle
from .common import page, form_errors, backend_status

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
@renderer_classes([PortalHTMLRenderer])
def index(request):
    if request.user is not None:
        return redirect(auth_store.home_path(request.user))
    return page('portal/index.html')


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
@renderer_classes([PortalHTMLRenderer])
def login_view(request):
    if request.method == 'GET':
        if request.user is not None:
            return redirect(auth_store.home_path(request.user))
        return page('portal/login.html', {'form': {'tipoUsuario': auth_store.PROFISSIONAL}, 'errors': {}})

    ser = LoginSerializer(data=request.data)
    if not ser.is_valid():
        return page('portal/login.html', {'form': request.data, 'errors': form_errors(ser.errors)}, 400)
    data = ser.validated_data
    try:
        token, usuario = autenticar(data['email'], data['senha'], data['tipoUsuario'])
    except BackendError as e:
        logger.info('login failed for %s (%s): %s', data['email'], data['tipoUsuario'], e.message)
        notify.error(request, 'Falha no Login', e)
        return page('portal/login.html', {'form': request.data, 'errors': form_errors(e)}, backend_status(e))

    auth_store.login(request.session, token, usuario)
    log_action(usuario=usuario, action='login')
    notify.success(request, 'Login realizado com sucesso!', f'Bem-vindo(a), {usuario.nome}.')
    return redirect(auth_store.home_path(usuario))


@api_view(['POST'])
@permission_classes([AllowAny])
@renderer_classes([PortalHTMLRenderer])
def logout_view(request):
    usuario = request.user
    auth_store.logout(request.session)
    if usuario is not None:
        log_action(usuario=usuario, action='logout')
        notify.success(request, 'Você saiu da sua conta.')
    return redirect('login')


@api_view(['GET', 'POST'])
@permission_classes([AllowAny])
@throttle_classes([LoginRateThrottle])
@renderer_classes([PortalHTMLRenderer])
def registrar_view(request):
    if request.method == 'GET':
        return page('portal/registrar.html', {'form': {}, 'errors': {}})

    ser = FamiliarCreateSerializer(data=request.data)
    if not ser.is_valid():
        return page('portal/registrar.html', {'form': request.data, 'errors': form_errors(ser.errors)}, 400)
    try:
        familiar = familiares.registrar(ser.validated_data)
    except BackendError as e:
        notify.error(request, 'Falha no cadastro', e, fallback='Erro ao criar conta.')
        return page('portal/registrar.html', {'form': request.data, 'errors': form_errors(e)}, backend_status(e))

    logger.info('familiar account created: id=%s', (familiar or {}).get('id'))
    notify.success(request, 'Conta criada com sucesso!', 'Verifique seu e-mail. Você já pode fazer o login.')
    return redirect('login')
