from flask import g, has_request_context
from templatesite.extensions import db
from templatesite.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    if not has_request_context() or not hasattr(g, "current_site"):
        return  # Skip logging outside a site-scoped request
    log = AuditLog()

    log.actor_id = getattr(g, "current_user_id", None)
    log.site_id = g.current_site.id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
