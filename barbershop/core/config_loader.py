import json
import os
import logging
from pathlib import Path
from typing import Dict, Any, List

from barbershop.core.config import settings

logger = logging.getLogger("barbershop")

PROJECT_ROOT = Path(__file__).resolve().parents[2]

def _config_path() -> Path:
    path = Path(settings.SHOP_CONFIG_PATH)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path

def load_shop_config() -> Dict[str, Any]:
    """
    Loads the shop catalogue (services, barbers) from the JSON file.
    Raises FileNotFoundError if config is missing, ValueError if it is not valid JSON.
    """
    path = _config_path()
    if not os.path.exists(path):
        logger.critical(f"❌ Shop config '{path}' not found!")
        raise FileNotFoundError(f"Configuration file not found at {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
            logger.info(f"✅ Shop config loaded for: {config.get('shop_name', 'Unknown')}")
            return config
    except json.JSONDecodeError as e:
        logger.critical(f"❌ Invalid JSON in shop config: {e}")
        raise ValueError(f"Invalid JSON in config file: {e}")

def get_services(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    return config.get("services", [])

def get_barbers(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    return config.get("barbers", [])
