from typing import Optional, Any, Dict
import logging

from .auth_store import Usuario

audit_logger = logging.getLogger('portal.audit')


def log_action(*, usuario: Optional[Usuario], action: str, object_type: Optional[str] = None,
               object_id: Optional[int] = None, detail: Optional[Dict[str, Any]] = None) -> None:
    audit_logger.info(
        'action=%s user=%s object=%s:%s detail=%s',
        action,
        usuario.pk if usuario else None,
        object_type, object_id,
        detail or {},
    )
