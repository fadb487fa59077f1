from templatesite.extensions import db
from .base import BaseModel
from .site_mixin import SiteMixin

class Section(BaseModel, SiteMixin):
    __tablename__ = "sections"

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=False)
    type = db.Column(db.String(100), nullable=False)  # text, image-text, faq, ...
    order = db.Column(db.Integer, nullable=False, default=0)
    payload = db.Column(db.JSON, default=dict)

    page = db.relationship("Page", back_populates="sections")
