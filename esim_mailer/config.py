from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"

    # SMTP relay
    smtp_port: int = 587
    # Seconds; None blocks until the server answers
    smtp_timeout: Optional[float] = None

    # Empty = bundled esim_mailer/templates/email_template.html
    template_path: str = ""

    # OAuth2 access token obtained by an external flow
    oauth_token: str = ""

    # QR code image sent inline with every message
    image_path: str = "qr_code.png"

    model_config = {"env_file": ".env", "env_prefix": "ESIM_MAILER_", "extra": "ignore"}


settings = Settings()
