"""
Pytest fixtures shared by unit and integration tests.

The Flask app runs on an in-memory SQLite database; every test gets a fresh
app, schema and default site.
"""

from collections.abc import Generator

import pytest
from flask import Flask
from flask_jwt_extended import create_access_token

from templatesite import create_app
from templatesite.extensions import db
from templatesite.models import Site, User
from templatesite.theme import PresentationState


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Testing app with a created schema."""
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask):
    return app.test_client()


# =============================================================================
# Site Fixtures
# =============================================================================

@pytest.fixture
def site(app: Flask) -> Site:
    """Site resolved by DEFAULT_SITE_SLUG."""
    site = Site()
    site.name = "Iron Gym"
    site.slug = app.config["DEFAULT_SITE_SLUG"]
    site.is_active = True
    db.session.add(site)
    db.session.commit()
    return site


@pytest.fixture
def admin_user(site: Site) -> User:
    user = User()
    user.site_id = site.id
    user.email = "admin@example.com"
    user.role = "admin"
    user.is_active = True
    user.set_password("s3cret-pass")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def auth_headers(site: Site, admin_user: User) -> dict:
    """Bearer token + site header for an admin of ``site``."""
    token = create_access_token(
        identity=admin_user.id,
        additional_claims={"site_id": site.id, "role": admin_user.role},
    )
    return {
        "Authorization": f"Bearer {token}",
        "X-Site-ID": site.id,
    }


# =============================================================================
# Presentation Fixtures
# =============================================================================

@pytest.fixture
def presentation() -> PresentationState:
    return PresentationState()
