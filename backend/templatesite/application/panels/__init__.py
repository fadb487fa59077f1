from .template_panel import (
    Notification,
    PanelState,
    TemplatePanel,
    design_panel,
    website_panel,
)
