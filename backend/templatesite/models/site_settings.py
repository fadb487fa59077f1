from templatesite.extensions import db
from .base import BaseModel
from .site_mixin import SiteMixin

# Column name -> settings key exposed to callers
SETTINGS_FIELDS = {
    "design_template": "designTemplate",
    "website_template": "websiteTemplate",
    "site_name": "siteName",
    "logo_type": "logoType",
    "logo_image_url": "logoImageUrl",
    "logo_icon": "logoIcon",
}


class SiteSettings(BaseModel, SiteMixin):
    """
    Single settings record per site.

    Known keys live in their own columns; anything else written through the
    settings store is kept in ``extra`` so merges never drop data.
    """
    __tablename__ = "site_settings"

    __table_args__ = (
        db.UniqueConstraint("site_id", name="uq_settings_per_site"),
    )

    design_template = db.Column(db.String(100), nullable=True)
    website_template = db.Column(db.String(100), nullable=True)

    site_name = db.Column(db.String(255), nullable=True)
    logo_type = db.Column(db.String(20), nullable=True)  # icon | image
    logo_image_url = db.Column(db.String(512), nullable=True)
    logo_icon = db.Column(db.String(50), nullable=True)

    extra = db.Column(db.JSON, nullable=False, default=dict)

    def to_dict(self):
        data = dict(self.extra or {})
        for column, key in SETTINGS_FIELDS.items():
            value = getattr(self, column)
            if value is not None:
                data[key] = value
        return data
