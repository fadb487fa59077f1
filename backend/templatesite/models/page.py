from templatesite.extensions import db
from .base import BaseModel
from .site_mixin import SiteMixin

# Named content blocks a page may carry, each an opaque JSON payload
CONTENT_BLOCKS = ("hero", "intro", "services", "features", "stats", "gallery", "cta")


class Page(BaseModel, SiteMixin):
    __tablename__ = 'pages'

    slug = db.Column(db.String(200), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=True)
    content = db.Column(db.JSON(none_as_null=True), default=dict)

    __table_args__ = (
        db.UniqueConstraint("site_id", "slug", name="uq_page_slug_per_site"),
    )

    # Dynamic sections in rendering order
    sections = db.relationship(
        "Section",
        back_populates="page",
        order_by="Section.order",
        cascade="all, delete-orphan"
    )
