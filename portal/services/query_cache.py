"""
Per-user cache of API reads with prefix invalidation.

Reads are stored under query keys such as ``('associacoes', {'status':
'pendente'})`` or ``('internacao', 7)``.  After a mutation the service
invalidates a key prefix, e.g. ``('associacoes',)`` drops every
association list whatever its filter.

Prefix invalidation cannot enumerate keys on every cache backend, so each
prefix owns a version counter and a data key embeds the versions of all
of its prefixes.  Bumping one counter makes every key below it
unreachable; stale entries simply expire.  Counters expire too, after
twice the data timeout, and every bump stores a fresh random token, so a
counter that lapsed and comes back never matches an older version.
"""
from __future__ import annotations

import uuid
from typing import Any, Callable, Optional

from django.conf import settings
from django.core.cache import cache

QueryKey = tuple


def _part(value: Any) -> str:
    if isinstance(value, dict):
        return ','.join(f'{k}={value[k]}' for k in sorted(value) if value[k] is not None)
    return str(value)


class QueryCache:
    def __init__(self, scope: str, timeout: Optional[int] = None):
        self.scope = scope
        self.timeout = settings.INFOCARE_QUERY_CACHE_TIMEOUT if timeout is None else timeout

    @property
    def version_timeout(self) -> int:
        # outlives every data key stored under the version it replaces
        return max(self.timeout * 2, 60)

    def _version_key(self, prefix: list[str]) -> str:
        return f"qv:{self.scope}:{'/'.join(prefix)}"

    def _data_key(self, key: QueryKey) -> str:
        parts = [_part(p) for p in key]
        version_keys = [self._version_key(parts[:i + 1]) for i in range(len(parts))]
        versions = cache.get_many(version_keys)
        tagged = [f'{p}@{versions.get(vk, 0)}' for p, vk in zip(parts, version_keys)]
        return f"q:{self.scope}:{'/'.join(tagged)}"

    def fetch(self, key: QueryKey, fetcher: Callable[[], Any]) -> Any:
        if self.timeout <= 0:
            return fetcher()
        data_key = self._data_key(key)
        cached = cache.get(data_key)
        if cached is not None:
            return cached
        data = fetcher()
        if data is not None:
            cache.set(data_key, data, self.timeout)
        return data

    def set_query_data(self, key: QueryKey, data: Any) -> None:
        if self.timeout > 0:
            cache.set(self._data_key(key), data, self.timeout)

    def invalidate(self, prefix: QueryKey, exact: bool = False) -> None:
        if exact:
            cache.delete(self._data_key(prefix))
            return
        vk = self._version_key([_part(p) for p in prefix])
        cache.set(vk, uuid.uuid4().hex[:12], self.version_timeout)


class NullQueryCache(QueryCache):
    """Cache used for anonymous requests: every read goes to the API."""

    def __init__(self):
        super().__init__(scope='anon', timeout=0)

    def invalidate(self, prefix: QueryKey, exact: bool = False) -> None:
        return None
