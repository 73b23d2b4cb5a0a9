"""Error types raised by the eSIM mailer."""

from typing import Optional


class MailerError(Exception):
    """Base class for every failure the mailer reports to its caller."""

    prefix = "Mailer error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class UnsupportedProviderError(MailerError):
    """The sender's domain does not belong to a supported provider."""

    prefix = "Unsupported email provider"

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"No supported email provider for '{address}'")


class MessageError(MailerError):
    """Address parsing or MIME assembly failed."""

    prefix = "Email message error"


class SmtpError(MailerError):
    """
    TLS/relay configuration or the final submission failed.

    `cause` holds the secondary error behind the transport failure, when
    the transport reported one.
    """

    prefix = "SMTP error"

    def __init__(
        self,
        detail: str,
        provider: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.provider = provider
        self.cause = cause
        super().__init__(detail)


class MailerIOError(MailerError):
    """Reading the image (or another file) failed."""

    prefix = "IO error"


class TemplateError(MailerError):
    prefix = "Template processing failed"


class ConfigError(MailerError):
    prefix = "Configuration error"
