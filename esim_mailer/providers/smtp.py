"""SMTP transport authenticating with an OAuth2 bearer token (XOAUTH2)."""

import logging
import smtplib
import ssl
from dataclasses import dataclass, field
from email.message import Message
from typing import Optional

from esim_mailer.errors import SmtpError
from esim_mailer.providers.base import PROVIDER_CONFIGS, XOAUTH2, Provider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportConfig:
    host: str
    port: int
    username: str
    token: str = field(repr=False)
    ssl_context: ssl.SSLContext = field(repr=False)
    require_tls: bool = True
    mechanism: str = XOAUTH2
    timeout: Optional[float] = None


class XOAuth2SmtpTransport:
    """
    Send a message through a provider's relay on the submission port.

    STARTTLS is mandatory and XOAUTH2 is the only mechanism tried. A
    bearer token is never offered to LOGIN or PLAIN. Nothing touches the
    network until send() is called, and every send opens its own
    connection.
    """

    def __init__(self, provider: Provider, config: TransportConfig):
        self.provider = provider
        self.config = config

    @property
    def provider_type(self) -> str:
        return str(self.provider)

    def _xoauth2(self, challenge: Optional[bytes] = None) -> str:
        # 334 after the initial response carries the server's error JSON;
        # XOAUTH2 expects an empty reply.
        if challenge is not None:
            logger.debug("XOAUTH2 challenge from %s: %r", self.config.host, challenge)
            return ""
        return f"user={self.config.username}\x01auth=Bearer {self.config.token}\x01\x01"

    def _authenticate(self, server: smtplib.SMTP) -> None:
        advertised = server.esmtp_features.get("auth", "").upper().split()
        if self.config.mechanism not in advertised:
            raise smtplib.SMTPNotSupportedError(
                f"{self.config.host} does not advertise AUTH {self.config.mechanism}"
            )
        server.auth(self.config.mechanism, self._xoauth2)

    def send(self, message: Message) -> None:
        """
        Connect, upgrade to TLS, authenticate and submit `message`.

        Raises smtplib.SMTPException or OSError unchanged.
        """
        kwargs = {}
        if self.config.timeout is not None:
            kwargs["timeout"] = self.config.timeout

        with smtplib.SMTP(self.config.host, self.config.port, **kwargs) as server:
            server.ehlo()
            if self.config.require_tls:
                server.starttls(context=self.config.ssl_context)
                server.ehlo()
            self._authenticate(server)
            server.send_message(message)


def configure_transport(
    provider: Provider,
    from_address: str,
    token: str,
    port: Optional[int] = None,
    timeout: Optional[float] = None,
) -> XOAuth2SmtpTransport:
    """
    Build a transport for `provider` with (from_address, token) credentials.

    TLS parameters are bound to the provider's relay hostname. Any failure
    raises SmtpError naming the provider.
    """
    try:
        provider_config = PROVIDER_CONFIGS[provider]
    except KeyError as exc:
        raise SmtpError(f"No SMTP relay configured for {provider}", provider=str(provider)) from exc

    name = provider_config.display_name
    host = provider_config.smtp_host

    try:
        context = ssl.create_default_context()
        context.check_hostname = True
        context.verify_mode = ssl.CERT_REQUIRED
    except (ssl.SSLError, OSError, ValueError) as exc:
        raise SmtpError(f"Failed to configure TLS for {name}: {exc}", provider=name) from exc

    try:
        config = TransportConfig(
            host=host,
            port=port or provider_config.smtp_port,
            username=from_address,
            token=token,
            ssl_context=context,
            mechanism=provider_config.auth_mechanism,
            timeout=timeout,
        )
    except (TypeError, ValueError) as exc:
        raise SmtpError(f"Failed to connect to {name} SMTP: {exc}", provider=name) from exc

    logger.debug("Configured %s transport %s:%s for %s", name, config.host, config.port, from_address)
    return XOAuth2SmtpTransport(provider, config)
