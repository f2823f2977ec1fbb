"""
ASGI config for the InfoCare portal.

The portal only serves plain HTTP, so this is Django's stock ASGI handler.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "infocare.settings")

application = get_asgi_application()
