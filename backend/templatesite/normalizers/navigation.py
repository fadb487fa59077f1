def normalize_navigation_item(item):
    data = {
        "id": item.id,
        "href": item.href,
        "label": item.label,
        "order": item.order,
    }

    # Absent means visible, so only carry an explicit flag
    if item.visible is not None:
        data["visible"] = item.visible

    return data
