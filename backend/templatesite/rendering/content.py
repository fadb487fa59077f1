from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PageContentResult:
    """
    Result of loading a page: named blocks, dynamic sections and load state.

    ``content`` stays None until a page record has been loaded.
    """
    content: Optional[Dict[str, Any]] = None
    sections: List[Dict[str, Any]] = field(default_factory=list)
    loading: bool = False
    error: Optional[Exception] = None
