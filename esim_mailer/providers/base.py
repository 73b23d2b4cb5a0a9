"""Supported webmail providers and their SMTP profiles."""

import enum
from dataclasses import dataclass

XOAUTH2 = "XOAUTH2"


class Provider(enum.Enum):
    GMAIL = "gmail"
    OUTLOOK = "outlook"

    @classmethod
    def from_address(cls, address: str) -> "Provider":
        from esim_mailer.providers.resolver import resolve_provider

        return resolve_provider(address)

    @property
    def config(self) -> "ProviderConfig":
        return PROVIDER_CONFIGS[self]

    def __str__(self) -> str:
        return self.config.display_name


@dataclass(frozen=True)
class ProviderConfig:
    """Static SMTP profile for one provider."""
    display_name: str
    smtp_host: str
    domains: tuple[str, ...]
    smtp_port: int = 587
    auth_mechanism: str = XOAUTH2


PROVIDER_CONFIGS: dict[Provider, ProviderConfig] = {
    Provider.GMAIL: ProviderConfig(
        display_name="Gmail",
        smtp_host="smtp.gmail.com",
        domains=("gmail.com",),
    ),
    Provider.OUTLOOK: ProviderConfig(
        display_name="Outlook",
        smtp_host="smtp-mail.outlook.com",
        domains=("outlook.com", "hotmail.com"),
    ),
}
