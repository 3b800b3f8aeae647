from models.subscription_model import EmailSubscription
from models.users_model import Users

__all__ = ["EmailSubscription", "Users"]
