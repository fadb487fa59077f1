from functools import wraps
from flask import g, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity

def site_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        site = getattr(g, "current_site", None)
        if not site:
            return jsonify({"error": "Site context missing"}), 400

        claims = get_jwt()
        if claims.get("site_id") != site.id:
            return jsonify({"error": "Site mismatch"}), 403

        g.current_user_id = get_jwt_identity()
        return fn(*args, **kwargs)
    return wrapper

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
