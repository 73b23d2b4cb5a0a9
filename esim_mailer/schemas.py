"""Pydantic schemas for send requests."""

from typing import Optional

from pydantic import BaseModel, Field


class SendRequest(BaseModel):
    """
    Flat record of caller-supplied fields for one notification email.

    Fields are plain text. Addresses are only checked when the message is
    built.
    """

    email_from: str = Field(..., description="Sender address; its domain selects the provider")
    email_to: str = Field(..., description="Recipient address")
    bcc: Optional[str] = Field(None, description="Optional blind-copy address; empty is ignored")
    provider: str = Field(..., description="eSIM provider label shown in the subject and body")
    name: str = Field(..., description="Recipient name")
    data_amount: str = Field(..., description="Data allowance, e.g. 5GB")
    time_period: str = Field(..., description="Validity period, e.g. 30 days")
    location: str = Field(..., description="Destination country or region")

    model_config = {"frozen": True}
