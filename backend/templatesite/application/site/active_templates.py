from __future__ import annotations

from typing import Any, Dict, NamedTuple, Optional

from templatesite.catalog.design import DesignTemplate, get_design_template_by_id
from templatesite.catalog.website import WebsiteTemplate, get_website_template_by_id
from templatesite.theme import (
    PresentationState,
    apply_design_template,
    apply_website_template,
)


class ActiveTemplates(NamedTuple):
    design: DesignTemplate
    website: WebsiteTemplate


def resolve_active_templates(settings: Optional[Dict[str, Any]]) -> ActiveTemplates:
    """
    Templates in effect for a settings record.

    Missing settings or ids that are no longer in the catalog resolve to the
    first catalog entry.
    """
    settings = settings or {}
    return ActiveTemplates(
        design=get_design_template_by_id(settings.get("designTemplate")),
        website=get_website_template_by_id(settings.get("websiteTemplate")),
    )


def active_from_state(state: PresentationState) -> ActiveTemplates:
    return ActiveTemplates(
        design=get_design_template_by_id(state.design_template_id),
        website=get_website_template_by_id(state.website_template_id),
    )


def seed_presentation(state: PresentationState, settings: Optional[Dict[str, Any]]) -> None:
    active = resolve_active_templates(settings)
    if state.design_template_id is None:
        apply_design_template(state, active.design)
    if state.website_template_id is None:
        apply_website_template(state, active.website)


def sync_presentation(state: PresentationState, settings: Optional[Dict[str, Any]]) -> ActiveTemplates:
    """
    Re-apply the persisted selection to ``state``.

    Settings win over whatever was applied in-process earlier, including an
    optimistic selection whose save failed.
    """
    active = resolve_active_templates(settings)
    apply_design_template(state, active.design)
    apply_website_template(state, active.website)
    return active
