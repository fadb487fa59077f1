from typing import Any, Dict, List, Optional
from templatesite.extensions import db
from templatesite.models.page import Page
from templatesite.models.section import Section
from templatesite.domain.invariants.page import assert_page_content
from templatesite.utils.audit import log_action
from templatesite.utils.transaction import transactional


def update_page_content(
    *,
    site_id: str,
    page_key: str,
    content: Dict[str, Any],
    sections: Optional[List[Dict[str, Any]]] = None,
) -> Page:
    """
    Merge named blocks into a page and optionally replace its dynamic sections.

    Design rules:
    - Page is created on first write
    - A block set to null is removed
    - Sections, when given, replace the existing ones in list order
    - A section whose id matches one of this page's sections is updated in
      place so its id stays stable; unknown ids get a new row
    """
    assert_page_content(content, sections)

    page = Page.query.filter_by(site_id=site_id, slug=page_key).first()

    with transactional():
        if page is None:
            page = Page()
            page.site_id = site_id
            page.slug = page_key
            page.title = page_key.title()
            page.content = {}
            db.session.add(page)

        merged = dict(page.content or {})
        for name, block in content.items():
            if block is None:
                merged.pop(name, None)
            else:
                merged[name] = block
        page.content = merged

        if sections is not None:
            existing = {s.id: s for s in page.sections}
            ordered = []
            for order, data in enumerate(sections, start=1):
                payload = {k: v for k, v in data.items() if k not in ("id", "type")}

                section = existing.pop(data.get("id"), None)
                if section is None:
                    section = Section()
                    section.site_id = site_id
                section.type = data["type"]
                section.order = order
                section.payload = payload
                ordered.append(section)

            # Rows left in `existing` are orphaned and deleted by the cascade
            page.sections = ordered

        db.session.flush()

        log_action(
            action="page.content.update",
            entity_type="page",
            entity_id=page.id,
            payload={
                "blocks": sorted(content),
                "sections": len(sections) if sections is not None else None,
            },
        )

    return page
