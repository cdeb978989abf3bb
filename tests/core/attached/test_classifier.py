# tests/core/attached/test_classifier.py
from __future__ import annotations

from fxa.content.contracts.clients import ClientType, Device, OAuthApp
from fxa.content.core.attached.classifier import classify


class TestClassify:
    def test_device(self):
        record = classify(
            {
                "id": "d1",
                "clientType": "device",
                "name": "My Phone",
                "isCurrentDevice": True,
                "lastAccessTime": 1500,
                "lastAccessTimeFormatted": "a minute ago",
                "type": "mobile",
                "pushCallback": "https://push.example.com/x",
            }
        )

        assert isinstance(record, Device)
        assert record.id == "d1"
        assert record.name == "My Phone"
        assert record.is_current_device is True
        assert record.last_access_time == 1500
        assert record.last_access_time_formatted == "a minute ago"
        assert record.type == "mobile"
        assert record.client_type is ClientType.DEVICE
        assert record.extra == {"pushCallback": "https://push.example.com/x"}

    def test_device_defaults(self):
        record = classify({"id": "d1", "clientType": "device"})

        assert isinstance(record, Device)
        assert record.name is None
        assert record.is_current_device is False
        assert record.last_access_time is None

    def test_oauth_app(self):
        record = classify(
            {"id": "a1", "clientType": "oAuthApp", "name": "Notes", "scope": "profile sync"}
        )

        assert isinstance(record, OAuthApp)
        assert record.name == "Notes"
        assert record.scope == ("profile", "sync")
        assert record.client_type is ClientType.OAUTH_APP
        assert record.is_current_device is False
        assert record.last_access_time is None

    def test_oauth_app_ignores_device_attributes(self):
        record = classify(
            {"id": "a1", "clientType": "oAuthApp", "isCurrentDevice": True, "lastAccessTime": 9}
        )

        assert record.is_current_device is False
        assert record.last_access_time is None

    def test_numeric_id_is_stringified(self):
        assert classify({"id": 7, "clientType": "device"}).id == "7"

    def test_unknown_type_is_dropped(self):
        assert classify({"id": "x", "clientType": "webSession"}) is None
        assert classify({"id": "x"}) is None

    def test_missing_id_is_dropped(self):
        assert classify({"clientType": "device", "name": "ghost"}) is None
