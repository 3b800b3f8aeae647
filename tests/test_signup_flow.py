from signup_flow import GENERIC_ERROR_MESSAGE, SignupFlow, SignupState
from validation import EMAIL_MESSAGE


class RecordingSubmit:
    def __init__(self, response=(200, {"success": True, "subscription": {"id": 1}})):
        self.response = response
        self.calls = []

    def __call__(self, email):
        self.calls.append(email)
        return self.response


def test_success_clears_value():
    submit = RecordingSubmit()
    flow = SignupFlow(submit)

    assert flow.submit_email("a@b.com") is SignupState.SUCCESS
    assert submit.calls == ["a@b.com"]
    assert flow.value == ""
    assert flow.subscription == {"id": 1}


def test_invalid_value_never_reaches_endpoint():
    submit = RecordingSubmit()
    flow = SignupFlow(submit)

    assert flow.submit_email("not-an-email") is SignupState.IDLE
    assert flow.field_error == EMAIL_MESSAGE
    assert submit.calls == []


def test_server_rejection_keeps_value():
    flow = SignupFlow(RecordingSubmit((400, {"success": False, "message": EMAIL_MESSAGE})))

    assert flow.submit_email("a@b.com") is SignupState.ERROR
    assert flow.value == "a@b.com"
    assert flow.message == GENERIC_ERROR_MESSAGE


def test_falsy_success_flag_is_an_error():
    flow = SignupFlow(RecordingSubmit((200, {"success": False})))
    assert flow.submit_email("a@b.com") is SignupState.ERROR


def test_network_failure_is_an_error():
    def unreachable(email):
        raise ConnectionError("connection refused")

    flow = SignupFlow(unreachable)
    assert flow.submit_email("a@b.com") is SignupState.ERROR
    assert flow.value == "a@b.com"


def test_submit_ignored_while_pending():
    calls = []

    def reentrant(email):
        calls.append(email)
        # a second click while the first request is still in flight
        assert flow.submit_email("other@b.com") is SignupState.SUBMITTING
        return 200, {"success": True}

    flow = SignupFlow(reentrant)
    assert flow.submit_email("a@b.com") is SignupState.SUCCESS
    assert calls == ["a@b.com"]


def test_reset_returns_to_idle():
    flow = SignupFlow(RecordingSubmit((500, {"success": False})))
    flow.submit_email("a@b.com")
    flow.reset()

    assert flow.state is SignupState.IDLE
    assert flow.message is None
    assert not flow.is_pending
