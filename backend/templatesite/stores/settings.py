# templatesite/stores/settings.py
from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from templatesite.extensions import db
from templatesite.models.site_settings import SiteSettings, SETTINGS_FIELDS
from templatesite.utils.audit import log_action
from templatesite.utils.transaction import transactional
from .exceptions import SettingsStoreError

KEY_TO_COLUMN = {key: column for column, key in SETTINGS_FIELDS.items()}


class SqlSettingsStore:
    """
    Read/write access to a site's single settings record.

    Writes merge into the stored record: keys not present in the update keep
    their current value. The record is created on first write. There is no
    conflict detection, the last write wins.
    """

    def __init__(self, site_id: str):
        self.site_id = site_id

    def _load(self) -> Optional[SiteSettings]:
        return SiteSettings.query.filter_by(site_id=self.site_id).first()

    def get_site_settings(self) -> Optional[Dict[str, Any]]:
        try:
            record = self._load()
        except SQLAlchemyError as exc:
            raise SettingsStoreError("Failed to read site settings") from exc

        return record.to_dict() if record else None

    def update_site_settings(self, data: Dict[str, Any]) -> None:
        try:
            with transactional():
                record = self._load()
                if record is None:
                    record = SiteSettings()
                    record.site_id = self.site_id
                    record.extra = {}
                    db.session.add(record)

                extra = dict(record.extra or {})
                for key, value in data.items():
                    column = KEY_TO_COLUMN.get(key)
                    if column:
                        setattr(record, column, value)
                    else:
                        extra[key] = value
                record.extra = extra
                db.session.flush()  # ensures record.id exists

                log_action(
                    action="settings.update",
                    entity_type="site_settings",
                    entity_id=record.id,
                    payload={"fields": sorted(data)},
                )
        except SQLAlchemyError as exc:
            raise SettingsStoreError("Failed to update site settings") from exc
