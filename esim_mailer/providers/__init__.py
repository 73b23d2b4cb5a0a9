"""Webmail provider resolution and SMTP transport."""

from esim_mailer.providers.base import PROVIDER_CONFIGS, Provider, ProviderConfig
from esim_mailer.providers.resolver import resolve_provider
from esim_mailer.providers.smtp import TransportConfig, XOAuth2SmtpTransport, configure_transport

__all__ = [
    "PROVIDER_CONFIGS",
    "Provider",
    "ProviderConfig",
    "TransportConfig",
    "XOAuth2SmtpTransport",
    "configure_transport",
    "resolve_provider",
]
