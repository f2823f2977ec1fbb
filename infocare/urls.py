"""
URL configuration for the InfoCare portal.

The `urlpatterns` list routes URLs to views.  Every page and endpoint is
declared by the portal app in ``portal.routers``; this module only adds
the Prometheus exposition endpoint.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('', include('portal.routers')),
]
