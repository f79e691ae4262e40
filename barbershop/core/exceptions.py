"""Error taxonomy shared by the store, the services and the API layer.

Each error carries the HTTP status it maps to and a generic, client-safe
message. Details go to the log, never to the response body.
"""
from typing import Optional


class BookingError(Exception):
    status_code = 500
    message = "Erro interno"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(BookingError):
    status_code = 400
    message = "Dados incompletos"


class NotFound(BookingError):
    status_code = 404
    message = "Agendamento não encontrado"


class PersistenceError(BookingError):
    status_code = 500
    message = "Erro de armazenamento"


class ExternalServiceError(BookingError):
    status_code = 500
    message = "Falha ao enviar notificação"
