from datetime import datetime

from flask import Blueprint, render_template, current_app

from forms import SubscribeForm
from functions import subscribe_email, get_subscription_store
from signup_flow import SignupFlow, SignupState
from validation import EMAIL_MESSAGE

landing_page = Blueprint("landing_page", __name__)


@landing_page.route("/", methods=["GET", "POST"])
def index():
    """Coming-soon page. Without JavaScript the form posts back here."""
    form = SubscribeForm()
    store = get_subscription_store()
    flow = SignupFlow(lambda email: subscribe_email(store, {"email": email}, current_app.logger))

    if form.validate_on_submit():
        flow.submit_email(form.email.data)
        if flow.state is SignupState.SUCCESS:
            form.email.data = ""

    return render_template("index.html", form=form, flow=flow, states=SignupState, email_message=EMAIL_MESSAGE,
                           current_year=datetime.now().year)
