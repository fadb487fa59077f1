# templatesite/stores/content.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError

from templatesite.models.navigation_item import NavigationItem
from templatesite.models.page import Page
from templatesite.normalizers.navigation import normalize_navigation_item
from templatesite.normalizers.page import normalize_page_content, normalize_section
from templatesite.rendering.content import PageContentResult
from .exceptions import ContentStoreError

logger = logging.getLogger(__name__)


def load_page_content(site_id: str, page_key: str) -> PageContentResult:
    """
    Fetch a page's named content blocks and its dynamic sections.

    Failures are reported on the result rather than raised so the renderer
    can show its fallback screen.
    """
    try:
        page = Page.query.filter_by(site_id=site_id, slug=page_key).first()
    except SQLAlchemyError as exc:
        logger.exception("Error loading page content for %s", page_key)
        error = ContentStoreError(f"Failed to load page '{page_key}'")
        error.__cause__ = exc
        return PageContentResult(error=error)

    if page is None:
        return PageContentResult()

    return PageContentResult(
        content=normalize_page_content(page),
        sections=[normalize_section(s) for s in page.sections],
    )


def load_navigation(site_id: str) -> List[Dict[str, Any]]:
    try:
        items = (
            NavigationItem.query
            .filter_by(site_id=site_id)
            .order_by(NavigationItem.order.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        raise ContentStoreError("Failed to load navigation") from exc

    return [normalize_navigation_item(item) for item in items]
