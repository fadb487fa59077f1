from .lookup import lookup_by_id
from .design import DESIGN_TEMPLATES, DesignTemplate, get_design_template_by_id
from .website import WEBSITE_TEMPLATES, WebsiteTemplate, get_website_template_by_id
