from .active_templates import (
    ActiveTemplates,
    active_from_state,
    resolve_active_templates,
    seed_presentation,
    sync_presentation,
)
