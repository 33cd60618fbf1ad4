# File: dayview/core/config_manager.py
"""
Centralized configuration management for the day view layout engine.
Loads settings from environment variables and config files.
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv

from dayview.models import LayoutConfig, DEFAULT_WINDOW_MINUTES

# Load environment variables
load_dotenv()


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from dayview/core/

    # Subdirectories
    CONFIG_DIR = BASE_DIR / "config"
    OUTPUT_DIR = BASE_DIR / "output"
    LOGS_DIR = Path(os.getenv("DAYVIEW_LOGS_DIR", str(BASE_DIR / "logs")))

    # Files
    CONFIG_FILE = CONFIG_DIR / "config.json"
    EVENTS_FILE = CONFIG_DIR / "events.json"
    LAYOUT_OUTPUT_FILE = OUTPUT_DIR / "layout.json"
    ENV_FILE = BASE_DIR / ".env"

    # Layout Settings
    WINDOW_MINUTES = int(os.getenv("DAYVIEW_WINDOW_MINUTES", str(DEFAULT_WINDOW_MINUTES)))
    EDGE_MARGIN_PX = int(os.getenv("DAYVIEW_EDGE_MARGIN_PX", "10"))

    # Logging
    LOG_LEVEL = os.getenv("DAYVIEW_LOG_LEVEL", "INFO")

    @classmethod
    def load_layout_config(cls, filepath: Optional[Path] = None) -> LayoutConfig:
        """
        Load layout settings from JSON file.

        Missing keys fall back to the environment-derived class settings.
        A missing file is not an error: the environment settings are used.
        """
        filepath = Path(filepath) if filepath else cls.CONFIG_FILE
        data: Dict[str, Any] = {
            'window_minutes': cls.WINDOW_MINUTES,
            'edge_margin_px': cls.EDGE_MARGIN_PX,
        }

        if filepath.exists():
            with open(filepath, 'r', encoding='utf-8') as f:
                data.update(json.load(f))

        return LayoutConfig.from_dict(data)

    @classmethod
    def load_events(cls, filepath: Optional[Path] = None) -> List[Dict[str, Any]]:
        """Load raw event records from JSON file (a list, or an object with an 'events' list)."""
        filepath = Path(filepath) if filepath else cls.EVENTS_FILE
        if not filepath.exists():
            raise FileNotFoundError(f"Events file not found: {filepath}")

        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if isinstance(data, dict):
            return data.get('events', [])
        return data

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if cls.WINDOW_MINUTES <= 0:
            errors.append(f"DAYVIEW_WINDOW_MINUTES must be positive, got {cls.WINDOW_MINUTES}")

        if cls.EDGE_MARGIN_PX < 0:
            errors.append(f"DAYVIEW_EDGE_MARGIN_PX cannot be negative, got {cls.EDGE_MARGIN_PX}")

        if not cls.CONFIG_FILE.exists():
            errors.append(f"config.json not found at {cls.CONFIG_FILE}")
        else:
            try:
                cls.load_layout_config()
            except (ValueError, TypeError) as e:
                errors.append(f"Invalid {cls.CONFIG_FILE.name}: {e}")

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
