"""Send the eSIM notification email through the sender's webmail provider."""

import asyncio
import logging
import smtplib
import uuid
from functools import partial
from pathlib import Path
from typing import Optional, Union

from esim_mailer.config import Settings
from esim_mailer.config import settings as default_settings
from esim_mailer.errors import SmtpError
from esim_mailer.message import build_message, read_image
from esim_mailer.providers.resolver import resolve_provider
from esim_mailer.providers.smtp import configure_transport
from esim_mailer.schemas import SendRequest
from esim_mailer.template import QR_CID_PLACEHOLDER, EmailTemplate

logger = logging.getLogger(__name__)


def generate_content_id() -> str:
    return f"qr_image_cid@{uuid.uuid4()}"


def send_email(
    request: SendRequest,
    token: str,
    image_path: Union[str, Path],
    count: int,
    template: Optional[EmailTemplate] = None,
    settings: Optional[Settings] = None,
) -> None:
    """
    Render, build and submit one notification email.

    Steps run in a fixed order and stop at the first failure: read image,
    render, build message, resolve provider, configure transport, submit.
    The provider is resolved after the message is built, so an unsupported
    sender domain is reported only once the message itself is valid.

    Raises MailerIOError, TemplateError, MessageError,
    UnsupportedProviderError or SmtpError. Makes exactly one submission
    attempt.
    """
    if settings is None:
        settings = default_settings
    if template is None:
        template = EmailTemplate(settings.template_path or None)

    image_data = read_image(image_path)

    subject = template.subject(request, count)
    content_id = generate_content_id()
    body = template.body(request).replace(QR_CID_PLACEHOLDER, content_id)

    message = build_message(request, subject, body, image_data, content_id)

    provider = resolve_provider(request.email_from)
    transport = configure_transport(
        provider,
        request.email_from,
        token,
        port=settings.smtp_port,
        timeout=settings.smtp_timeout,
    )

    try:
        transport.send(message)
    except (smtplib.SMTPException, OSError) as exc:
        cause = exc.__cause__ or exc.__context__
        logger.error("Could not send email via %s to=%s: %s", provider, request.email_to, exc)
        if cause is not None:
            logger.error("Error source: %r", cause)
        raise SmtpError(
            f"Could not send email: {exc}",
            provider=str(provider),
            cause=cause,
        ) from exc

    logger.info("Email sent via %s to=%s subject=%s", provider, request.email_to, subject)


async def send_email_async(
    request: SendRequest,
    token: str,
    image_path: Union[str, Path],
    count: int,
    template: Optional[EmailTemplate] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Run send_email in the default executor."""
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(
        None,
        partial(send_email, request, token, image_path, count, template, settings),
    )
