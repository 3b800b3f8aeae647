from flask import Blueprint, request, jsonify, current_app

from functions import subscribe_email, get_subscription_store, SAVE_FAILED_MESSAGE, FETCH_FAILED_MESSAGE

subscription_api = Blueprint("subscription_api", __name__, url_prefix="/api")


# --- POST Route: Subscribe an email address (JSON body) ---
@subscription_api.post("/subscribe")
def subscribe():
    """Validates ``{"email": ...}`` and stores it, returning the subscription."""
    try:
        payload = request.get_json(silent=True)
        status_code, body = subscribe_email(get_subscription_store(), payload, current_app.logger)
        return jsonify(body), status_code

    except Exception as e:
        current_app.logger.error(f"Error in POST /api/subscribe: {e}", exc_info=True)
        return jsonify(success=False, message=SAVE_FAILED_MESSAGE), 500


# --- GET Route: Retrieve all subscriptions ---
@subscription_api.get("/subscriptions")
def subscriptions_all_data():
    try:
        subscriptions = get_subscription_store().get_all()
        return jsonify(subscriptions=[sub.to_dict() for sub in subscriptions]), 200

    except Exception as e:
        current_app.logger.error(f"Error in GET /api/subscriptions: {e}", exc_info=True)
        return jsonify(success=False, message=FETCH_FAILED_MESSAGE), 500


# --- JSON errors for unknown API paths and methods ---
@subscription_api.app_errorhandler(404)
def not_found(e):
    if request.path.startswith("/api/"):
        return jsonify(success=False, message="Not found."), 404
    return e


@subscription_api.app_errorhandler(405)
def method_not_allowed(e):
    if request.path.startswith("/api/"):
        return jsonify(success=False, message="Method not allowed."), 405
    return e
