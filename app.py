from flask import Flask
from flask_bootstrap import Bootstrap5

from config import get_config
from functions import make_clock
from storage import SubscriptionStore, UserStore

# --- Route Blueprints ---
from routes.subscription_routes import subscription_api
from routes.landing_routes import landing_page


def create_app(config_class=None, store=None, **settings):
    """Build the app and open its subscription store.

    ``settings`` override individual config keys. A caller-supplied *store*
    is used as is (and opened); otherwise one is built from
    ``SUBSCRIPTIONS_FILE``. Call :func:`shutdown_app` to flush it.
    """
    app = Flask(__name__)

    # --- Configuration and Extensions ---
    app.config.from_object(config_class or get_config())
    app.config.update(settings)
    Bootstrap5(app)

    if store is None:
        store = SubscriptionStore(
            app.config["SUBSCRIPTIONS_FILE"],
            clock=make_clock(app.config["TIMEZONE"]),
            logger=app.logger
        )
    store.open()
    app.extensions["subscription_store"] = store
    app.extensions["user_store"] = UserStore()

    app.register_blueprint(landing_page)
    app.register_blueprint(subscription_api)

    return app


def shutdown_app(app):
    """Flush and close the subscription store attached to *app*."""
    app.extensions["subscription_store"].close()
    app.logger.info("Subscription store closed.")


# --- Run Application ---
if __name__ == "__main__":
    app = create_app()
    try:
        app.run(debug=app.config["DEBUG"], port=5028)
    finally:
        shutdown_app(app)
