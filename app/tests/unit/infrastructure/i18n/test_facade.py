"""Tests for infrastructure.i18n.facade module."""

import pytest

from infrastructure.i18n import active_service, facade

pytestmark = pytest.mark.unit


class TestFacade:
    """Module-level helpers forward to the active service."""

    def test_translate(self, service):
        with active_service(service):
            assert facade.translate("welcome") == "Welcome"
            assert facade.translate("greeting", {"name": "Ann"}) == "Hello Ann"
            assert facade.translate("missing") == "missing"

    def test_translate_nullable(self, service):
        with active_service(service):
            assert facade.translate_nullable("home") == "Welcome"
            assert facade.translate_nullable("missing") is None

    def test_translate_or_default(self, service):
        with active_service(service):
            assert facade.translate_or_default("missing", "Default") == "Default"

    def test_has_translation(self, service):
        with active_service(service):
            assert facade.has_translation("created", "users") is True
            assert facade.has_translation("missing") is False

    def test_number_helpers(self, fr_service):
        with active_service(fr_service):
            assert facade.info("decimal_point") == ","
            assert facade.format_number(1234.5, 1) == "1 234,5"
            assert facade.parse_number("1 234,5") == 1234.5

    def test_format_currency(self, service):
        with active_service(service):
            assert facade.format_currency(1234.5, "USD") == "$1,234.50"
