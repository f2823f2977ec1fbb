import logging
import uuid

from django.core.cache import cache
from django.http import JsonResponse

from ..services.backend import BackendClient

logger = logging.getLogger(__name__)


def healthz(request):
    probe = uuid.uuid4().hex
    try:
        cache.set('healthz:probe', probe, 10)
        cache_ok = cache.get('healthz:probe') == probe
    except Exception as e:
        logger.warning('healthz cache check failed: %s', e)
        cache_ok = False
    backend_ok = BackendClient().ping()
    ok = cache_ok and backend_ok
    return JsonResponse({'ok': ok, 'cache': cache_ok, 'backend': backend_ok}, status=200 if ok else 503)
