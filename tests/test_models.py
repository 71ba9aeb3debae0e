from collections.abc import Awaitable

from swagger_assembler.models import (
    MethodInfo,
    MethodParameter,
    ResponseEvent,
    ResponseKind,
    SecurityEvent,
    VerbEvent,
)


class TestMethodParameter:
    def test_defaults(self):
        p = MethodParameter(name="id", type=str)
        assert p.is_optional is False
        assert p.markers == []


class TestMethodInfo:
    def test_minimal(self):
        info = MethodInfo(name="list")
        assert info.is_public is True
        assert info.doc is None
        assert info.return_type is None
        assert info.parameters == []
        assert info.response_kinds == []

    def test_keeps_type_descriptors(self):
        info = MethodInfo(name="list", return_type=Awaitable[list[str]])
        assert info.return_type == Awaitable[list[str]]


class TestEvents:
    def test_verb_event(self):
        event = VerbEvent(verb="customhttp", args=["OPTIONS", None], method=MethodInfo(name="opts"))
        assert event.args == ["OPTIONS", None]

    def test_response_event_defaults(self):
        event = ResponseEvent(status_code=200)
        assert event.kind is ResponseKind.STANDARD
        assert event.description is None
        assert event.example is None

    def test_security_event_keeps_raw_scopes(self):
        assert SecurityEvent(scheme="oauth2", scopes="read").scopes == "read"
