"""Subject and body templates for the eSIM notification email."""

import logging
from pathlib import Path
from typing import Optional, Union

from esim_mailer.errors import TemplateError
from esim_mailer.schemas import SendRequest

logger = logging.getLogger(__name__)

SUBJECT_TEMPLATE = "[{{provider}}] {{location}} eSIM"
BODY_TEMPLATE_PATH = Path(__file__).parent / "templates" / "email_template.html"

# Left in the body by EmailTemplate.body(); filled once the Content-ID exists.
QR_CID_PLACEHOLDER = "{{QR_CID}}"


class EmailTemplate:
    """
    Fixed subject/body templates filled by literal substring replacement.

    There is no escaping. Replacements run in a fixed order, so a field
    value containing a placeholder for a later field is itself replaced.
    """

    def __init__(self, body_path: Optional[Union[str, Path]] = None):
        path = Path(body_path) if body_path else BODY_TEMPLATE_PATH
        try:
            self.body_template = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise TemplateError(f"Could not read email template {path}: {exc}") from exc
        self.subject_template = SUBJECT_TEMPLATE
        logger.debug("Loaded email template from %s", path)

    def subject(self, request: SendRequest, count: int) -> str:
        subject = (
            self.subject_template
            .replace("{{provider}}", request.provider)
            .replace("{{location}}", request.location)
        )
        return f"{subject} - {count}"

    def body(self, request: SendRequest) -> str:
        """Render the HTML body. `{{QR_CID}}` is left for the caller."""
        return (
            self.body_template
            .replace("{{provider}}", request.provider)
            .replace("{{name}}", request.name)
            .replace("{{data_amount}}", request.data_amount)
            .replace("{{time_period}}", request.time_period)
            .replace("{{location}}", request.location)
        )
