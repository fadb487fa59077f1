from .content import PageContentResult
from .nodes import RenderNode
from .composer import HomeStatus, HomeView, compose_home
from .header import HeaderView, MobileMenu, build_header
