"""Configuration management for the Rookie Fuel planner."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Planning defaults
PLAN_MODE: Final[str] = os.getenv('PLAN_MODE', 'standard').lower()
ATHLETE_WEIGHT_KG: Final[float] = float(os.getenv('ATHLETE_WEIGHT_KG', '56.5'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
EXPORT_DIR: Final[Path] = Path(os.getenv('EXPORT_DIR', str(BASE_DIR.parent / 'exports')))
EXPORT_BASENAME: Final[str] = os.getenv('EXPORT_BASENAME', 'elfit-rookie-fuel-plan')
