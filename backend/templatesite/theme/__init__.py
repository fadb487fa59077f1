from .state import PresentationState, ThemeRegistry
from .apply import apply_design_template, apply_website_template
