"""Resolve the webmail provider for a sender address."""

from esim_mailer.errors import UnsupportedProviderError
from esim_mailer.providers.base import PROVIDER_CONFIGS, Provider

_DOMAIN_TO_PROVIDER = {
    domain: provider
    for provider, config in PROVIDER_CONFIGS.items()
    for domain in config.domains
}


def resolve_provider(address: str) -> Provider:
    """
    Resolve the provider from the domain after the last '@'.

    Domains must match exactly: no case folding, no subdomains. Anything
    else, including an address without '@', raises UnsupportedProviderError
    carrying the full address.
    """
    _, sep, domain = address.rpartition("@")
    provider = _DOMAIN_TO_PROVIDER.get(domain) if sep else None
    if provider is None:
        raise UnsupportedProviderError(address)
    return provider
