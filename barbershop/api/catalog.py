from fastapi import APIRouter

from barbershop.core.config import settings
from barbershop.core.config_loader import load_shop_config, get_services, get_barbers

router = APIRouter()

@router.get("/catalog")
async def get_catalog():
    """Services and barbers offered by the booking form."""
    config = load_shop_config()
    return {
        "shopName": config.get("shop_name", settings.SHOP_NAME),
        "currency": config.get("currency", "R$"),
        "services": get_services(config),
        "barbers": get_barbers(config),
    }
