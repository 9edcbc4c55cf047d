"""Unit tests for the Notifier and its abstraction."""

import pytest

from solid.domain.service.messaging import MessageService, Notifier
from tests.fakes import RecordingMessageService


class TestNotifier:

    def test_delegates_to_injected_service(self):
        service = RecordingMessageService()
        Notifier(service).send_notification("Hello", "alice@example.com")
        assert service.sent == [("Hello", "alice@example.com")]

    def test_exposes_injected_service(self):
        service = RecordingMessageService()
        assert Notifier(service).service is service

    def test_swapping_service_changes_only_the_target(self):
        first, second = RecordingMessageService(), RecordingMessageService()

        Notifier(first).send_notification("Ping", "bob")
        Notifier(second).send_notification("Ping", "bob")

        assert first.sent == second.sent == [("Ping", "bob")]

    def test_abstraction_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            MessageService()  # type: ignore[abstract]
