"""
URL mappings of the InfoCare portal.

Routes are declared without a trailing slash (``APPEND_SLASH`` is off).
"""
from django.urls import path

from .views import auth, perfil, pacientes, internacoes, associacoes, familiar, transcricao, health

urlpatterns = [
    path('', auth.index, name='index'),
    path('login', auth.login_view, name='login'),
    path('logout', auth.logout_view, name='logout'),
    path('registrar', auth.registrar_view, name='registrar'),
    path('healthz', health.healthz, name='healthz'),

    # Profissional
    path('profissional', perfil.profissional_home, name='profissional'),
    path('profissional/pacientes', pacientes.lista_pacientes, name='pacientes'),
    path('profissional/pacientes/<int:pk>', pacientes.detalhe_paciente, name='paciente'),
    path('profissional/pacientes/<int:pk>/editar', pacientes.editar_paciente, name='paciente_editar'),
    path('profissional/pacientes/<int:pk>/excluir', pacientes.excluir_paciente, name='paciente_excluir'),
    path('profissional/internacoes', internacoes.lista_internacoes, name='internacoes'),
    path('profissional/internacoes/<int:pk>', internacoes.detalhe_internacao, name='internacao'),
    path('profissional/internacoes/<int:pk>/editar', internacoes.editar_internacao, name='internacao_editar'),
    path('profissional/internacoes/<int:pk>/alta', internacoes.alta_internacao, name='internacao_alta'),
    path('profissional/internacoes/<int:pk>/excluir', internacoes.excluir_internacao, name='internacao_excluir'),
    path('profissional/internacoes/<int:pk>/evolucoes', internacoes.nova_evolucao, name='evolucao_criar'),
    path('profissional/associacoes', associacoes.lista_associacoes, name='associacoes'),
    path('profissional/associacoes/<int:pk>/aprovar', associacoes.aprovar_associacao, name='associacao_aprovar'),
    path('profissional/associacoes/<int:pk>/rejeitar', associacoes.rejeitar_associacao, name='associacao_rejeitar'),

    # Familiar
    path('familiar', perfil.familiar_home, name='familiar'),
    path('familiar/associacoes', familiar.minhas_associacoes, name='minhas_associacoes'),
    path('familiar/internacoes', familiar.minhas_internacoes, name='minhas_internacoes'),
    path('familiar/internacoes/<int:pk>', familiar.minha_internacao, name='minha_internacao'),

    # JSON
    path('api/transcrever', transcricao.transcrever, name='api_transcrever'),
]
