from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar


class Identified(Protocol):
    id: str


T = TypeVar("T", bound=Identified)


def lookup_by_id(catalog: Sequence[T], template_id: Optional[str]) -> T:
    """
    Resolve a template by id.

    A missing or unknown id is not an error: the first catalog entry is the
    default and is returned instead.
    """
    if not catalog:
        raise ValueError("Template catalog cannot be empty")

    if template_id:
        for template in catalog:
            if template.id == template_id:
                return template

    return catalog[0]
