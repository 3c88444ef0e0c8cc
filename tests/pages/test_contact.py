"""
Tests for the contact form.
"""

import pytest

from components.pages.contact import SubmitStatus, submit_contact_form


class TestSubmitContactForm:
    """Test contact form validation."""

    def test_valid_submission(self, caplog):
        with caplog.at_level("INFO"):
            status = submit_contact_form({"name": "Sam", "email": "sam@example.org", "message": "Hello"})

        assert status is SubmitStatus.SUCCESS
        assert "sam@example.org" in caplog.text

    @pytest.mark.parametrize("form_data", [
        {"name": "", "email": "sam@example.org", "message": "Hello"},
        {"name": "Sam", "email": "not-an-email", "message": "Hello"},
        {"name": "Sam", "email": "sam@example.org", "message": "   "},
        {"name": "Sam", "email": None, "message": "Hello"},
    ])
    def test_invalid_submission(self, form_data):
        assert submit_contact_form(form_data) is SubmitStatus.ERROR
