from flask import jsonify, current_app
from templatesite.domain.invariants.exceptions import InvariantViolation
from templatesite.stores.exceptions import StoreError

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(StoreError)
    def handle_store_error(error):
        current_app.logger.error(f"Store error: {error}")
        response = jsonify({
            "error": type(error).__name__,
            "message": str(error)
        })
        response.status_code = 503
        return response
