"""
Pytest configuration and shared fixtures for esim-mailer tests.
"""

from unittest.mock import MagicMock, patch

import pytest

from esim_mailer.schemas import SendRequest

# Smallest valid PNG: signature plus IHDR/IDAT/IEND for a 1x1 pixel
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06"
    b"\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f\x00\x00\x01\x01"
    b"\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def sample_request():
    """A send request from a Gmail sender with no Bcc."""
    return SendRequest(
        email_from="sender@gmail.com",
        email_to="recipient@example.com",
        bcc=None,
        provider="TestProvider",
        name="John",
        data_amount="5GB",
        time_period="30 days",
        location="Egypt",
    )


@pytest.fixture
def image_path(tmp_path):
    """Write a tiny PNG to a temp file and return its path."""
    path = tmp_path / "qr_code.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def smtp_server():
    """
    Patch smtplib.SMTP in the transport module.

    Yields (smtp_class_mock, server_mock). The server advertises XOAUTH2.
    """
    with patch("esim_mailer.providers.smtp.smtplib.SMTP") as smtp_cls:
        server = MagicMock()
        server.esmtp_features = {"auth": "LOGIN PLAIN XOAUTH2 PLAIN-CLIENTTOKEN OAUTHBEARER"}
        smtp_cls.return_value.__enter__.return_value = server
        yield smtp_cls, server
