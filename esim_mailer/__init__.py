"""Send eSIM QR-code notification emails over Gmail/Outlook SMTP with XOAUTH2."""

from esim_mailer.errors import (
    ConfigError,
    MailerError,
    MailerIOError,
    MessageError,
    SmtpError,
    TemplateError,
    UnsupportedProviderError,
)
from esim_mailer.mailer import send_email, send_email_async
from esim_mailer.providers import Provider, resolve_provider
from esim_mailer.schemas import SendRequest
from esim_mailer.template import EmailTemplate

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "EmailTemplate",
    "MailerError",
    "MailerIOError",
    "MessageError",
    "Provider",
    "SendRequest",
    "SmtpError",
    "TemplateError",
    "UnsupportedProviderError",
    "resolve_provider",
    "send_email",
    "send_email_async",
]
