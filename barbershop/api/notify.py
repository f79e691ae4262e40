from fastapi import APIRouter
from typing import Optional
from pydantic import BaseModel, ConfigDict

from barbershop.core.exceptions import ValidationError
from barbershop.services.notification_service import send_whatsapp

router = APIRouter()

class NotifyRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    to: Optional[str] = None
    message: Optional[str] = None

# Plain def: the Twilio call is blocking, FastAPI runs it in the threadpool
@router.post("/notify")
def notify(req: NotifyRequest):
    if not req.to or not req.message:
        raise ValidationError("Parâmetros inválidos")

    result = send_whatsapp(req.to, req.message)
    return result.model_dump(exclude_none=True)
