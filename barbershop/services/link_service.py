"""WhatsApp deep links (wa.me) for the owner notification and client reminders.

Pure string building: nothing here talks to the network, and phone numbers are
never validated, only stripped down to their digits.
"""
import re
from typing import Optional
from urllib.parse import quote

from barbershop.core.config import settings
from barbershop.models.booking import Booking

WA_ME_URL = "https://wa.me/{phone}?text={text}"

# Same set encodeURIComponent leaves untouched
_UNESCAPED = "-_.!~*'()"

_NON_DIGITS = re.compile(r"[^0-9]")


def digits_only(phone: str) -> str:
    return _NON_DIGITS.sub("", phone or "")


def encode_text(message: str) -> str:
    return quote(message, safe=_UNESCAPED)


def build_wa_link(phone: str, message: str) -> str:
    return WA_ME_URL.format(phone=digits_only(phone), text=encode_text(message))


def owner_notification_message(booking: Booking, shop_name: Optional[str] = None) -> str:
    shop_name = shop_name or settings.SHOP_NAME
    return (
        f"Novo agendamento na {shop_name}:\n"
        f"Cliente: {booking.client_name}\n"
        f"Telefone: {booking.client_phone}\n"
        f"Serviço: {booking.service_name}\n"
        f"Barbeiro: {booking.barber_name}\n"
        f"Data: {booking.date}\n"
        f"Hora: {booking.time}\n"
        f"ID: {booking.id}"
    )


def reminder_message(booking: Booking, shop_name: Optional[str] = None) -> str:
    shop_name = shop_name or settings.SHOP_NAME
    return (
        f"Olá {booking.client_name}, lembrando do seu agendamento na {shop_name} "
        f"em {booking.date} às {booking.time} para {booking.service_name}."
    )


def build_owner_notification(
    booking: Booking,
    owner_number: Optional[str] = None,
    shop_name: Optional[str] = None,
) -> str:
    """
    Link that opens a chat with the shop owner, pre-filled with the booking details.
    Defaults come from settings (OWNER_WHATSAPP_NUMBER, SHOP_NAME).
    """
    owner_number = owner_number or settings.OWNER_WHATSAPP_NUMBER
    return build_wa_link(owner_number, owner_notification_message(booking, shop_name))


def build_reminder(booking: Booking, shop_name: Optional[str] = None) -> str:
    """Link that opens a chat with the client, pre-filled with a reminder."""
    return build_wa_link(booking.client_phone, reminder_message(booking, shop_name))
