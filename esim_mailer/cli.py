"""
Command-line entry point for sending one eSIM notification email.

The OAuth2 access token is obtained elsewhere and passed with --token or
the ESIM_MAILER_OAUTH_TOKEN environment variable.

Usage:
    esim-mailer --email-from me@gmail.com --email-to you@example.com \\
        --provider Airalo --name Sam --data-amount 5GB \\
        --time-period "30 days" --location Egypt --image qr.png
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from esim_mailer.config import settings
from esim_mailer.errors import ConfigError, MailerError, SmtpError
from esim_mailer.mailer import send_email
from esim_mailer.schemas import SendRequest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esim-mailer",
        description="Send an eSIM QR code by email through Gmail or Outlook",
    )
    parser.add_argument("--email-from", required=True, help="Sender address (gmail.com, outlook.com or hotmail.com)")
    parser.add_argument("--email-to", required=True, help="Recipient address")
    parser.add_argument("--bcc", default=None, help="Optional blind-copy address")
    parser.add_argument("--provider", required=True, help="eSIM provider label")
    parser.add_argument("--name", required=True, help="Recipient name")
    parser.add_argument("--data-amount", required=True, help="Data allowance, e.g. 5GB")
    parser.add_argument("--time-period", required=True, help="Validity period, e.g. '30 days'")
    parser.add_argument("--location", required=True, help="Destination country or region")
    parser.add_argument("--image", default=settings.image_path, help="QR code PNG to embed")
    parser.add_argument("--count", type=int, default=1, help="Sequence number appended to the subject")
    parser.add_argument("--token", default=None, help="OAuth2 access token (default: ESIM_MAILER_OAUTH_TOKEN)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    request = SendRequest(
        email_from=args.email_from,
        email_to=args.email_to,
        bcc=args.bcc,
        provider=args.provider,
        name=args.name,
        data_amount=args.data_amount,
        time_period=args.time_period,
        location=args.location,
    )

    try:
        token = args.token or settings.oauth_token
        if not token:
            raise ConfigError("no OAuth2 token; pass --token or set ESIM_MAILER_OAUTH_TOKEN")
        send_email(request, token, args.image, args.count)
    except MailerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if isinstance(exc, SmtpError) and exc.cause is not None:
            print(f"Error source: {exc.cause!r}", file=sys.stderr)
        return 1

    print("Email sent successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
