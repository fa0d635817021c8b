import logging

import pytest

from storm_message import ApplicationContext, Builder, MessageReceiver, RegistrationError, ScopedContext

from tests.mocks.transport_mock import RecordingListener, RecordingTransport


def test_default_receiver_installs_and_requests_token(app_context, transport, listener):
    settings = Builder(app_context).project_number("123456").register_listener(listener).build()

    assert transport.installed == [settings.receiver]
    assert transport.token_requests == [{"project_number": "123456", "listener": listener}]
    assert listener.tokens == ["push-token-1"]
    assert settings.receiver.is_registered
    assert settings.receiver.context is app_context


def test_missing_project_number_reported_to_listener(app_context, transport, listener):
    Builder(app_context).register_listener(listener).build()

    assert transport.token_requests == []
    assert len(listener.errors) == 1
    assert isinstance(listener.errors[0], RegistrationError)
    assert listener.errors[0].error_code == "missing_project_number"


def test_missing_project_number_without_listener_does_not_raise(app_context, transport, caplog):
    with caplog.at_level(logging.ERROR, logger="storm_message"):
        Builder(app_context).build()

    assert transport.token_requests == []
    assert "registration skipped" in caplog.text


def test_token_delivered_from_transport_thread(listener):
    transport = RecordingTransport(token="async-token", threaded=True)
    context = ApplicationContext(transport)

    Builder(context).project_number("42").register_listener(listener).build()

    assert transport.delivered.wait(timeout=5)
    assert listener.tokens == ["async-token"]


def test_receiver_can_be_registered_again(app_context, transport):
    settings = Builder(app_context).project_number("42").build()

    settings.receiver.register(app_context)

    assert transport.installed == [settings.receiver, settings.receiver]
    assert len(transport.token_requests) == 2


def test_scoped_context_shares_parent_transport(app_context, transport):
    scoped = ScopedContext(app_context)

    assert scoped.transport is transport
    assert scoped.application_context is app_context


def test_on_message_subclass_receives_payload(app_context):
    class Inbox(MessageReceiver):
        def __init__(self):
            super().__init__()
            self.messages = []

        def on_message(self, data):
            self.messages.append(dict(data))

    inbox = Inbox()
    settings = Builder(app_context).project_number("1").message_receiver(inbox).build()

    settings.receiver.on_message({"title": "hi"})

    assert inbox.messages == [{"title": "hi"}]


def test_default_on_message_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="storm_message.receiver"):
        MessageReceiver().on_message({"b": 1, "a": 2})

    assert "['a', 'b']" in caplog.text


def test_application_context_requires_transport():
    from storm_message import InvalidArgumentError

    with pytest.raises(InvalidArgumentError):
        ApplicationContext(None)


def test_listener_double_records_errors():
    listener = RecordingListener()
    listener.on_error(RuntimeError("boom"))

    assert str(listener.errors[0]) == "boom"
