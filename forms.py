from flask_wtf import FlaskForm
from wtforms.fields import EmailField, SubmitField
from wtforms.validators import DataRequired, ValidationError

from validation import EMAIL_MESSAGE, validate_email_address


class SharedEmailRule:
    """WTForms adapter around the rule the subscribe API applies."""

    def __call__(self, form, field):
        message = validate_email_address(field.data)
        if message:
            raise ValidationError(message)


class SubscribeForm(FlaskForm):
    email = EmailField("Email Address", validators=[
        DataRequired(message=EMAIL_MESSAGE),
        SharedEmailRule()
    ], render_kw={"placeholder": "your@email.com"})
    submit = SubmitField("Notify Me")
