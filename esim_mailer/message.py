"""MIME assembly for the eSIM notification email."""

import logging
from email import errors as email_errors
from email import policy
from email.headerregistry import Address
from email.mime.image import MIMEImage
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from pathlib import Path
from typing import Optional, Union

from esim_mailer.errors import MailerIOError, MessageError
from esim_mailer.schemas import SendRequest

logger = logging.getLogger(__name__)

IMAGE_SUBTYPE = "png"


def read_image(image_path: Union[str, Path]) -> bytes:
    """Read the inline image as raw bytes."""
    path = Path(image_path)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise MailerIOError(f"Could not read image {path}: {exc}") from exc


def parse_address(value: str, field: str) -> Address:
    """
    Parse a single RFC 5322 mailbox, optionally with a display name.

    `field` names the header in the error message ("from", "to", "BCC").
    """
    try:
        header = policy.SMTP.header_factory(field, value)
    except (ValueError, email_errors.MessageError) as exc:
        raise MessageError(f"Invalid {field} email address: {exc}") from exc

    if header.defects:
        raise MessageError(f"Invalid {field} email address: {header.defects[0]}")
    if len(header.addresses) != 1:
        raise MessageError(
            f"Invalid {field} email address: expected one mailbox, got {len(header.addresses)}"
        )

    address = header.addresses[0]
    if not address.username or not address.domain:
        raise MessageError(f"Invalid {field} email address: missing domain in '{value}'")
    return address


def build_message(
    request: SendRequest,
    subject: str,
    body_html: str,
    image_data: bytes,
    content_id: str,
) -> MIMEMultipart:
    """
    Build a multipart/related message: an HTML part followed by the inline
    PNG it references through `cid:<content_id>`.

    `body_html` must already have the Content-ID substituted.
    """
    from_addr = parse_address(request.email_from, "from")
    to_addr = parse_address(request.email_to, "to")
    bcc_addr: Optional[Address] = None
    if request.bcc:
        bcc_addr = parse_address(request.bcc, "BCC")

    try:
        msg = MIMEMultipart("related", policy=policy.SMTP)
        msg["From"] = str(from_addr)
        msg["To"] = str(to_addr)
        if bcc_addr is not None:
            msg["Bcc"] = str(bcc_addr)
        msg["Subject"] = subject

        msg.attach(MIMEText(body_html, "html", "utf-8", policy=policy.SMTP))

        image = MIMEImage(image_data, IMAGE_SUBTYPE, policy=policy.SMTP)
        image.add_header("Content-ID", f"<{content_id}>")
        image.add_header("Content-Disposition", "inline")
        msg.attach(image)
    except (ValueError, TypeError, email_errors.MessageError) as exc:
        raise MessageError(f"Failed to build email: {exc}") from exc

    logger.debug("Built message to=%s content_id=%s", to_addr.addr_spec, content_id)
    return msg
