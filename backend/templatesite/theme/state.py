from __future__ import annotations

import threading
from typing import Callable, Dict, Optional


class PresentationState:
    """
    CSS custom properties and active template ids for one site.

    Components read this when rendering, so a template applied here shows up
    on the next render without anything else being reloaded.
    """

    def __init__(self) -> None:
        self.variables: Dict[str, str] = {}
        self.design_template_id: Optional[str] = None
        self.website_template_id: Optional[str] = None

    @property
    def is_seeded(self) -> bool:
        return self.design_template_id is not None and self.website_template_id is not None

    def set_variable(self, name: str, value: str) -> None:
        self.variables[name] = value

    def snapshot(self) -> Dict[str, object]:
        return {
            "design_template": self.design_template_id,
            "website_template": self.website_template_id,
            "variables": dict(self.variables),
        }

    def to_css(self) -> str:
        body = "".join(
            f"{name}: {value};" for name, value in sorted(self.variables.items())
        )
        return f":root {{{body}}}"


class ThemeRegistry:
    """
    Holds one PresentationState per site.

    Stored on ``app.extensions`` and passed explicitly to the code that needs
    it; ``seed`` runs once for a state that has never had a template applied.
    """

    def __init__(self) -> None:
        self._states: Dict[str, PresentationState] = {}
        self._lock = threading.Lock()

    def get(self, site_id: str, seed: Optional[Callable[[PresentationState], None]] = None) -> PresentationState:
        with self._lock:
            state = self._states.get(site_id)
            if state is None:
                state = PresentationState()
                self._states[site_id] = state

        if seed is not None and not state.is_seeded:
            seed(state)

        return state

    def reset(self, site_id: str) -> None:
        with self._lock:
            self._states.pop(site_id, None)
