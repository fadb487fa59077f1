"""
Admin template panel: pick a template from a catalog and persist the choice.

Selecting a template is a two-phase operation. The template is applied to the
site's presentation state first, then the choice is written to the settings
record. If the write fails an error notification is emitted but the applied
template is NOT rolled back, so the live look and the stored setting can
disagree until the next successful save or reload.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from templatesite.catalog.badges import category_badge
from templatesite.catalog.design import DESIGN_TEMPLATES
from templatesite.catalog.lookup import lookup_by_id
from templatesite.catalog.website import WEBSITE_TEMPLATES
from templatesite.stores.exceptions import StoreError
from templatesite.theme import (
    PresentationState,
    apply_design_template,
    apply_website_template,
)

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    def get_site_settings(self) -> Optional[Dict[str, Any]]: ...

    def update_site_settings(self, data: Dict[str, Any]) -> None: ...


class PanelState(str, Enum):
    IDLE = "idle"
    SAVING = "saving"


@dataclass(frozen=True)
class Notification:
    key: str
    level: str  # loading | success | error
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "level": self.level, "message": self.message}


@dataclass(frozen=True)
class PanelMessages:
    saving: str
    saved: str
    failed: str


class TemplatePanel:
    def __init__(
        self,
        *,
        catalog: Sequence[Any],
        settings_key: str,
        notification_key: str,
        messages: PanelMessages,
        store: SettingsStore,
        state: PresentationState,
        apply: Callable[[PresentationState, Any], None],
        describe: Callable[[Any], Dict[str, Any]],
    ):
        self.catalog = catalog
        self.settings_key = settings_key
        self.notification_key = notification_key
        self.messages = messages
        self.store = store
        self.presentation = state
        self._apply = apply
        self._describe = describe

        self.current_template = catalog[0]
        self.selected_id = catalog[0].id
        self.state = PanelState.IDLE
        self.notifications: List[Notification] = []
        self._disposed = False

    # -------------------------------------------------
    # Lifecycle
    # -------------------------------------------------

    def mount(self) -> None:
        try:
            settings = self.store.get_site_settings()
        except StoreError:
            logger.exception("Error loading %s", self.settings_key)
            return

        if self._disposed:
            return

        stored_id = (settings or {}).get(self.settings_key)
        if stored_id:
            self._select_locally(stored_id)

    def dispose(self) -> None:
        """Stop this panel from reacting to saves that finish later."""
        self._disposed = True

    @property
    def disposed(self) -> bool:
        return self._disposed

    # -------------------------------------------------
    # Selection
    # -------------------------------------------------

    def _select_locally(self, template_id: str) -> Any:
        template = lookup_by_id(self.catalog, template_id)
        self.current_template = template
        self.selected_id = template.id
        self._apply(self.presentation, template)
        return template

    def _notify(self, level: str, message: str) -> None:
        if self._disposed:
            return
        # Same key: the newest notification replaces the previous one
        self.notifications = [n for n in self.notifications if n.key != self.notification_key]
        self.notifications.append(Notification(self.notification_key, level, message))

    def select(self, template_id: str) -> bool:
        """
        Apply ``template_id`` locally, then persist it.

        Returns True when the settings record was updated.
        """
        template = self._select_locally(template_id)

        self.state = PanelState.SAVING
        self._notify("loading", self.messages.saving)

        try:
            # Fresh read so fields changed elsewhere since mount are kept
            current = self.store.get_site_settings() or {}
            self.store.update_site_settings({**current, self.settings_key: template.id})
        except StoreError:
            logger.exception("Error saving %s=%s", self.settings_key, template.id)
            if not self._disposed:
                self._notify("error", self.messages.failed)
                self.state = PanelState.IDLE
            return False

        if not self._disposed:
            self._notify("success", self.messages.saved)
            self.state = PanelState.IDLE
        return True

    # -------------------------------------------------
    # Presentation
    # -------------------------------------------------

    def to_view(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "selected_id": self.selected_id,
            "current": self._describe(self.current_template),
            "templates": [
                {**self._describe(t), "selected": t.id == self.selected_id}
                for t in self.catalog
            ],
            "notifications": [n.to_dict() for n in self.notifications],
        }


# -------------------------------------------------
# Descriptors for the panel views
# -------------------------------------------------

def describe_design_template(template) -> Dict[str, Any]:
    components = template.components
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "preview": template.preview,
        "category": category_badge(template.category),
        "components": {
            "hero": {
                "style": components.hero.style.value,
                "text_alignment": components.hero.text_alignment.value,
            },
            "cards": {
                "style": components.cards.style.value,
                "border_radius": components.cards.border_radius.value,
                "shadow": components.cards.shadow.value,
            },
            "buttons": {
                "style": components.buttons.style.value,
                "border_radius": components.buttons.border_radius.value,
            },
            "sections": {"spacing": components.sections.spacing.value},
        },
        "tags": [
            components.hero.style.value,
            components.cards.style.value,
            components.sections.spacing.value,
        ],
    }


def describe_website_template(template) -> Dict[str, Any]:
    structure = template.structure
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "preview": template.preview,
        "category": category_badge(template.category),
        "structure": {
            "layout": structure.layout.value,
            "navigation": structure.navigation.value,
            "hero_style": structure.hero_style.value,
        },
        "pages": {
            "home": {
                "layout": template.pages.home.layout.value,
                "grid_style": template.pages.home.grid_style,
            },
        },
        "tags": [
            structure.layout.value,
            structure.hero_style.value,
            template.pages.home.grid_style,
        ],
    }


# -------------------------------------------------
# Factories
# -------------------------------------------------

DESIGN_MESSAGES = PanelMessages(
    saving="Saving design template...",
    saved="Design template updated successfully!",
    failed="Error saving design template",
)

WEBSITE_MESSAGES = PanelMessages(
    saving="Applying website template...",
    saved="Website template applied successfully!",
    failed="Error applying website template",
)


def design_panel(store: SettingsStore, state: PresentationState, catalog=DESIGN_TEMPLATES) -> TemplatePanel:
    return TemplatePanel(
        catalog=catalog,
        settings_key="designTemplate",
        notification_key="design-template",
        messages=DESIGN_MESSAGES,
        store=store,
        state=state,
        apply=apply_design_template,
        describe=describe_design_template,
    )


def website_panel(store: SettingsStore, state: PresentationState, catalog=WEBSITE_TEMPLATES) -> TemplatePanel:
    return TemplatePanel(
        catalog=catalog,
        settings_key="websiteTemplate",
        notification_key="website-template",
        messages=WEBSITE_MESSAGES,
        store=store,
        state=state,
        apply=apply_website_template,
        describe=describe_website_template,
    )
