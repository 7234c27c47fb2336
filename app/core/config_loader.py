import calendar
import json
import os
import logging
from typing import Dict, Any, List

from app.core.config import settings

logger = logging.getLogger("app")

def load_booking_config(path: str = None) -> Dict[str, Any]:
    """
    Loads booking configuration (company name, bookable month, time slots) from JSON file.
    Raises FileNotFoundError if config is missing.
    Returns: Dict containing config.
    """
    config_path = path or settings.BOOKING_CONFIG_PATH

    if not os.path.exists(config_path):
        logger.critical(f"❌ Booking config file '{config_path}' not found! Application cannot start.")
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
            logger.info(f"✅ Booking config loaded for: {config.get('company_name', 'Unknown')}")
            return config
    except json.JSONDecodeError as e:
        logger.critical(f"❌ Failed to parse booking config JSON: {e}")
        raise ValueError(f"Invalid JSON in config file: {e}")

def get_time_slots(config: Dict[str, Any]) -> List[str]:
    return list(config.get("time_slots", []))

def get_available_dates(config: Dict[str, Any]) -> List[str]:
    """
    Every day of the configured booking month as a display label,
    e.g. "February 15, 2026".
    """
    year = int(config["booking_year"])
    month = int(config["booking_month"])
    month_name = calendar.month_name[month]
    _, days_in_month = calendar.monthrange(year, month)
    return [f"{month_name} {day}, {year}" for day in range(1, days_in_month + 1)]
