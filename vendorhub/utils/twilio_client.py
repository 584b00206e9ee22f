import logging
from typing import Optional

from twilio.rest import Client

from vendorhub.core.config import settings

log = logging.getLogger(__name__)


def _get_client() -> Optional[Client]:
    if not settings.twilio_account_sid or not settings.twilio_auth_token:
        return None
    return Client(settings.twilio_account_sid, settings.twilio_auth_token)


def _whatsapp(number: str) -> str:
    return number if number.startswith("whatsapp:") else f"whatsapp:{number}"


def send_whatsapp(to_phone: str, body: str) -> Optional[str]:
    """
    Fire-and-forget WhatsApp message. Returns the message SID, or None when
    nothing was sent. Never raises.
    """
    try:
        if not to_phone:
            return None
        if not settings.twilio_from_number:
            log.warning("TWILIO_FROM_NUMBER missing; message to %s not sent", to_phone)
            return None
        client = _get_client()
        if not client:
            log.warning("Twilio credentials missing; message to %s not sent", to_phone)
            return None

        message = client.messages.create(
            body=body,
            from_=_whatsapp(settings.twilio_from_number),
            to=_whatsapp(to_phone),
        )
        return message.sid
    except Exception:
        log.exception("WhatsApp send failed to %s", to_phone)
        return None
