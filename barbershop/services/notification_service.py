import requests
from typing import Optional
from pydantic import BaseModel

from barbershop.core.config import settings
from barbershop.core.exceptions import ExternalServiceError
from barbershop.core.logger import logger
from barbershop.services.link_service import build_wa_link

TWILIO_MESSAGES_URL = "https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json"


class NotificationResult(BaseModel):
    success: bool
    via: str
    link: Optional[str] = None


def send_twilio_whatsapp(to_number: str, message: str) -> None:
    """
    Sends a WhatsApp message through the Twilio REST API (basic auth, form body).
    Raises ExternalServiceError on transport failure or a non-2xx answer.
    """
    sid = settings.TWILIO_ACCOUNT_SID
    url = TWILIO_MESSAGES_URL.format(sid=sid)
    payload = {
        "From": f"whatsapp:{settings.TWILIO_FROM}",
        "To": f"whatsapp:{to_number}",
        "Body": message,
    }

    try:
        logger.info(f"📤 Sending WhatsApp to {to_number} via Twilio...")
        response = requests.post(
            url,
            data=payload,
            auth=(sid, settings.TWILIO_AUTH_TOKEN),
            timeout=settings.NOTIFY_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"❌ Exception sending WhatsApp via Twilio: {e}")
        raise ExternalServiceError() from e

    if response.status_code not in (200, 201):
        logger.error(f"❌ Twilio Error {response.status_code}: {response.text}")
        raise ExternalServiceError()

    logger.info(f"✅ WhatsApp successfully sent to {to_number}.")


def send_whatsapp(to_number: str, message: str) -> NotificationResult:
    """
    Delivers `message` to `to_number`.
    With Twilio credentials configured the provider sends it; otherwise a wa.me
    link is returned for the caller to open by hand.
    """
    if settings.twilio_enabled:
        send_twilio_whatsapp(to_number, message)
        return NotificationResult(success=True, via="twilio")

    logger.info("ℹ️ Twilio not configured, falling back to wa.me link.")
    return NotificationResult(success=True, via="wa.me", link=build_wa_link(to_number, message))
