from templatesite.extensions import db

class SiteMixin:
    site_id = db.Column(
        db.String(36),
        db.ForeignKey('sites.id'),
        nullable=False,
        index=True
    )
