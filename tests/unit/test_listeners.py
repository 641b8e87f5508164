"""Unit tests for listener normalization."""

import pytest

from pipeline_hooks import (
    DeferredListener,
    DirectListener,
    HandlerListener,
    Hook,
    InvalidHookHandlerError,
    make_listener,
    type_identity,
)

from mocks import HookHandlerA, HookHandlerMock, Payload


def _resolver(type_identifier):
    return HookHandlerMock()


class TestMakeListener:
    """Tests for make_listener()."""

    def test_function(self):
        """Plain callables become DirectListener."""

        def listener(event, context, additional_payload):
            return False

        normalized = make_listener(listener, _resolver)

        assert isinstance(normalized, DirectListener)
        assert normalized(Hook(), None, []) is False

    def test_handler_object(self):
        """Objects with handle() become HandlerListener."""
        handler = HookHandlerA()
        normalized = make_listener(handler, _resolver)

        assert isinstance(normalized, HandlerListener)
        event = Hook(Payload())
        assert normalized(event, None, []) is True
        assert event.payload.data == {"A": True}
        assert handler.dispatched is True

    def test_duck_typed_handler(self):
        """handle() is enough, no base class needed."""

        class Handler:
            def handle(self, event, context, additional_payload):
                return context

        normalized = make_listener(Handler(), _resolver)
        assert isinstance(normalized, HandlerListener)
        assert normalized(Hook(), "ctx", []) == "ctx"

    def test_handle_wins_over_call(self):
        """A callable object with handle() is used through handle()."""

        class Both:
            def __call__(self, event, context, additional_payload):
                return "call"

            def handle(self, event, context, additional_payload):
                return "handle"

        assert make_listener(Both(), _resolver)(Hook(), None, []) == "handle"

    def test_class_path(self):
        """Strings become DeferredListener bound to the resolver."""
        normalized = make_listener("app.Handler", _resolver)

        assert isinstance(normalized, DeferredListener)
        assert normalized.type_identifier == "app.Handler"
        assert normalized.resolver is _resolver

    def test_handler_class(self):
        """Handler classes are deferred as class objects."""
        normalized = make_listener(HookHandlerA, _resolver)

        assert isinstance(normalized, DeferredListener)
        assert normalized.target is HookHandlerA
        assert normalized.type_identifier == type_identity(HookHandlerA)

    def test_local_handler_class_reaches_resolver_as_class(self):
        """Classes defined in a function are handed over as-is, not as a path."""
        made = []

        class LocalHandler(HookHandlerMock):
            pass

        def resolver(target):
            made.append(target)
            return target()

        listener = make_listener(LocalHandler, resolver)
        listener(Hook(Payload()), None, [])

        assert made == [LocalHandler]
        assert "<locals>" in listener.type_identifier

    def test_already_normalized(self):
        """Normalized listeners are passed through."""
        listener = DirectListener(lambda event, context, more: None)
        assert make_listener(listener, _resolver) is listener

    @pytest.mark.parametrize("listener", [45, None, "", object(), Payload])
    def test_invalid(self, listener):
        """Everything else is rejected."""
        with pytest.raises(InvalidHookHandlerError, match="not valid"):
            make_listener(listener, _resolver)


class TestDeferredListener:
    """Tests for DeferredListener invocation."""

    def test_resolves_on_every_call(self):
        """The resolver is asked again for each call."""
        made = []

        def resolver(type_identifier):
            made.append(type_identifier)
            return HookHandlerMock()

        listener = DeferredListener("app.Handler", resolver)
        assert made == []

        listener(Hook(), None, [])
        listener(Hook(), None, [])
        assert made == ["app.Handler", "app.Handler"]

    def test_result_passed_through(self):
        """The handler's return value is returned."""
        listener = DeferredListener("app.Stop", lambda type_identifier: HookHandlerMock(stop_propagating=True))
        assert listener(Hook(), None, []) is False
