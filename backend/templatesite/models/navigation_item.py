from templatesite.extensions import db
from .base import BaseModel
from .site_mixin import SiteMixin

class NavigationItem(BaseModel, SiteMixin):
    __tablename__ = "navigation_items"

    href = db.Column(db.String(512), nullable=False)
    label = db.Column(db.String(200), nullable=False)
    order = db.Column(db.Integer, nullable=False, default=0)
    # NULL means visible
    visible = db.Column(db.Boolean, nullable=True)

    __table_args__ = (
        db.Index("idx_navigation_site_order", "site_id", "order"),
    )
