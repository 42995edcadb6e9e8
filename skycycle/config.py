"""
Configuration management with environment variable support.

All settings can be overridden via environment variables.
Automatically loads .env file if present.
"""

import os
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv

# Load .env file from project root (one level up from skycycle/)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Logging configuration
LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = os.getenv("LOG_LEVEL", "INFO")

# Day-night cycle defaults (editable at runtime through the control panel)
CYCLE_DURATION_SECONDS: float = float(os.getenv("CYCLE_DURATION_SECONDS", "60"))
AUTO_PLAY: bool = os.getenv("AUTO_PLAY", "true").lower() == "true"
START_TIME: float = float(os.getenv("START_TIME", "0.5"))  # 0 = midnight, 0.5 = noon

# Celestial geometry
CELESTIAL_DISTANCE: float = float(os.getenv("CELESTIAL_DISTANCE", "80"))  # orbit radius
CELESTIAL_HEIGHT: float = float(os.getenv("CELESTIAL_HEIGHT", "10"))  # orbit centre above ground
VISIBILITY_THRESHOLD: float = float(os.getenv("VISIBILITY_THRESHOLD", "0.1"))

# Frame loop
FRAME_RATE: int = int(os.getenv("FRAME_RATE", "60"))
RENDER_LOOP_ENABLED: bool = os.getenv("RENDER_LOOP_ENABLED", "true").lower() == "true"

# Log one in this many per-tick DEBUG records (60 = once a second at 60 fps)
TICK_LOG_EVERY: int = int(os.getenv("TICK_LOG_EVERY", "60"))
