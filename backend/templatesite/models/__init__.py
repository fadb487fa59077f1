from .site import Site
from .site_settings import SiteSettings
from .page import Page
from .section import Section
from .navigation_item import NavigationItem
from .user import User
from .audit_log import AuditLog
