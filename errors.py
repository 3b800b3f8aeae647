class SubscriptionError(Exception):
    """Base class for failures raised while handling a subscription."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(SubscriptionError):
    """The submitted email address is malformed."""


class PersistenceError(SubscriptionError):
    """Reading or writing the subscriptions file failed."""


class NetworkError(SubscriptionError):
    """The signup form could not reach the subscription endpoint."""
