from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


@dataclass
class RenderNode:
    """
    One element of a composed page.

    ``kind`` names the partial that renders it; ``data`` is the block payload
    handed to that partial untouched.
    """
    kind: str
    data: Any = None
    key: Optional[str] = None
    anchor: Optional[str] = None
    css_class: Optional[str] = None
    children: List["RenderNode"] = field(default_factory=list)

    def walk(self) -> Iterator["RenderNode"]:
        yield self
        for child in self.children:
            yield from child.walk()


def flatten(nodes: List[RenderNode]) -> List[RenderNode]:
    return [node for root in nodes for node in root.walk()]
