from datetime import datetime

import pytz
from flask import current_app

from errors import ValidationError
from validation import parse_subscription

SUCCESS_MESSAGE = "Thank you for subscribing!"
SAVE_FAILED_MESSAGE = "Failed to save your subscription. Please try again later."
FETCH_FAILED_MESSAGE = "Failed to fetch subscriptions."


def make_clock(tz_name):
    """Return a callable giving the current time in *tz_name* (tz-aware)."""
    tz = pytz.timezone(tz_name)

    def now():
        return datetime.now(tz)

    return now


def subscribe_email(store, payload, logger):
    """Validate a subscribe request body and save it.

    Returns ``(status_code, body)``. Every failure is mapped to a response;
    nothing is raised to the caller.
    """
    try:
        email = parse_subscription(payload)
    except ValidationError as e:
        return 400, {"success": False, "message": e.message}

    try:
        subscription = store.save(email)
    except Exception as e:
        logger.error(f"Error saving subscription: {e}", exc_info=True)
        return 500, {"success": False, "message": SAVE_FAILED_MESSAGE}

    logger.info(f"Subscription {subscription.id} stored for {subscription.email}")
    return 200, {
        "success": True,
        "message": SUCCESS_MESSAGE,
        "subscription": subscription.to_dict()
    }


def get_subscription_store():
    """The store the app factory attached to the running app."""
    return current_app.extensions["subscription_store"]
