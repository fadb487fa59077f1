from templatesite.models.page import CONTENT_BLOCKS


def normalize_page_content(page):
    """Named content blocks of a page; absent blocks map to None."""
    content = page.content or {}
    return {name: content.get(name) for name in CONTENT_BLOCKS}


def normalize_section(section):
    data = dict(section.payload or {})
    data["type"] = section.type
    data["id"] = section.id
    return data


def normalize_page(page, admin=False):
    data = {
        "id": page.id,
        "slug": page.slug,
        "title": page.title,
        "content": normalize_page_content(page),
        "sections": [normalize_section(s) for s in page.sections],
    }

    if admin:
        data["created_at"] = page.created_at.isoformat() if page.created_at else None
        data["updated_at"] = page.updated_at.isoformat() if page.updated_at else None

    return data
