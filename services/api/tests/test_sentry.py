"""
Sentry before_send scrubbing and init gating.
"""

from unittest.mock import patch

from services.api.middleware import sentry as sentry_mw


def _event(**request):
    return {"request": request, "breadcrumbs": {"values": []}}


class TestStripSensitiveData:

    def test_auth_and_cookie_headers_filtered(self):
        event = _event(headers={"Authorization": "Bearer x", "Cookie": "s=1", "Accept": "*/*"})

        out = sentry_mw._strip_sensitive_data(event, {})

        headers = out["request"]["headers"]
        assert headers["Authorization"] == "[FILTERED]"
        assert headers["Cookie"] == "[FILTERED]"
        assert headers["Accept"] == "*/*"

    def test_message_content_and_email_filtered(self):
        event = _event(data={"content": "meet me at gate 4", "email": "a@example.com", "sender_id": "u1"})

        out = sentry_mw._strip_sensitive_data(event, {})

        body = out["request"]["data"]
        assert body["content"] == "[FILTERED]"
        assert body["email"] == "[FILTERED]"
        assert body["sender_id"] == "u1"

    def test_document_location_filtered(self):
        event = _event(data={"file_url": "https://files.example.com/p.pdf", "file_hash": "abc", "name": "Passport"})

        out = sentry_mw._strip_sensitive_data(event, {})

        assert out["request"]["data"]["file_url"] == "[FILTERED]"
        assert out["request"]["data"]["file_hash"] == "[FILTERED]"
        assert out["request"]["data"]["name"] == "Passport"

    def test_breadcrumb_headers_filtered(self):
        event = {
            "breadcrumbs": {"values": [{"data": {"headers": {"set-cookie": "s=2"}}}]},
        }

        out = sentry_mw._strip_sensitive_data(event, {})

        assert out["breadcrumbs"]["values"][0]["data"]["headers"]["set-cookie"] == "[FILTERED]"

    def test_non_dict_body_untouched(self):
        event = _event(data="raw body")
        assert sentry_mw._strip_sensitive_data(event, {})["request"]["data"] == "raw body"


class TestSetupSentry:

    def test_no_dsn_skips_init(self):
        with patch.object(sentry_mw.settings, "sentry_dsn", ""), \
             patch.object(sentry_mw.sentry_sdk, "init") as init:
            sentry_mw.setup_sentry()
        init.assert_not_called()

    def test_dsn_initialises_with_scrubber(self):
        with patch.object(sentry_mw.settings, "sentry_dsn", "https://key@sentry.example.com/1"), \
             patch.object(sentry_mw.sentry_sdk, "init") as init:
            sentry_mw.setup_sentry()
        init.assert_called_once()
        kwargs = init.call_args.kwargs
        assert kwargs["before_send"] is sentry_mw._strip_sensitive_data
        assert kwargs["send_default_pii"] is False
