"""Unit tests for the hook value object and key helpers."""

from pipeline_hooks import Hook, HookInterface, Index, Name, type_identity
from pipeline_hooks.types import as_key

from mocks import HookA, HookB, Payload


class TestHook:
    """Tests for Hook."""

    def test_constructor_and_getters(self):
        """Name defaults to the type identity, payload is kept as given."""
        payload = {"foo": 1234, "BAR": False}
        hook = Hook(payload)

        assert hook.name == "pipeline_hooks.types.Hook"
        assert hook.name == type_identity(Hook)
        assert hook.payload == payload

    def test_set_payload(self):
        """set_payload() replaces the payload and returns the hook."""
        hook = Hook()
        assert hook.payload is None

        assert hook.set_payload({"foo": 1}) is hook
        assert hook.payload == {"foo": 1}

        assert hook.set_payload(None) is hook
        assert hook.payload is None

    def test_payload_property_setter(self):
        """The payload property can be assigned directly."""
        hook = Hook("before")
        hook.payload = "after"
        assert hook.payload == "after"

    def test_to_string(self):
        """to_string() and str() both return the name."""
        hook = HookB()

        assert hook.to_string() == "hook_b"
        assert hook.to_string() == hook.name
        assert str(hook) == hook.to_string()

    def test_class_name_attribute(self):
        """Subclasses without hook_name use their own type identity."""
        assert HookA().name == type_identity(HookA)
        assert HookA().name.endswith(".HookA")

    def test_instance_name(self):
        """A name given to the constructor wins over the class default."""
        hook = HookB(name="custom")
        assert hook.name == "custom"
        assert HookB().name == "hook_b"

    def test_empty_name_falls_back(self):
        """An empty name never leaks out."""
        assert Hook(name="").name == type_identity(Hook)

    def test_repr(self):
        """repr() shows the class and the name."""
        assert repr(HookB()) == "<HookB name='hook_b'>"


class TestHookInterface:
    """Tests for the HookInterface capability check."""

    def test_hooks_conform(self):
        """Hook and its subclasses satisfy HookInterface."""
        assert isinstance(Hook(), HookInterface)
        assert isinstance(HookA(Payload()), HookInterface)

    def test_other_values_do_not_conform(self):
        """Plain values and unrelated objects are rejected."""
        for value in (1234, "i am a String", {"foo": "Bar"}, object(), Payload()):
            assert not isinstance(value, HookInterface)

    def test_duck_typed_hook_conforms(self):
        """Any object with the four members conforms."""

        class Event:
            name = "duck"
            payload = None

            def set_payload(self, payload):
                self.payload = payload
                return self

            def to_string(self):
                return self.name

        assert isinstance(Event(), HookInterface)


class TestTypeIdentity:
    """Tests for type_identity()."""

    def test_class_and_instance(self):
        """Classes and their instances share the same identity."""
        assert type_identity(HookA) == type_identity(HookA())
        assert type_identity(HookA) == f"{HookA.__module__}.HookA"


class TestKeys:
    """Tests for the tagged collection keys."""

    def test_int_and_str_are_tagged(self):
        """Raw ints and strings become Index and Name."""
        assert as_key(3) == Index(3)
        assert as_key("hook_b") == Name("hook_b")

    def test_tagged_keys_pass_through(self):
        """Index and Name are returned unchanged."""
        assert as_key(Index(0)) == Index(0)
        assert as_key(Name("x")) == Name("x")

    def test_invalid_keys(self):
        """Booleans, floats and other values are never keys."""
        assert as_key(True) is None
        assert as_key(2.5) is None
        assert as_key(None) is None
        assert as_key(["hook_b"]) is None
