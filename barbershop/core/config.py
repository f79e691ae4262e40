from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Manual Barbearia Booking API"
    API_PREFIX: str = "/api"

    # Server
    PORT: int = 5000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    # Shop
    SHOP_NAME: str = "Manual Barbearia"
    OWNER_WHATSAPP_NUMBER: str = "5592994329119"
    SHOP_CONFIG_PATH: str = "data/shop_config.json"

    # Supabase
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    SUPABASE_BOOKINGS_TABLE: str = "bookings"

    # Notifications (optional Twilio WhatsApp)
    TWILIO_ACCOUNT_SID: str = ""
    TWILIO_AUTH_TOKEN: str = ""
    TWILIO_FROM: str = ""
    NOTIFY_TIMEOUT: int = 10

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def twilio_enabled(self) -> bool:
        return bool(self.TWILIO_ACCOUNT_SID and self.TWILIO_AUTH_TOKEN)

settings = Settings()
