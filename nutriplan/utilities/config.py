"""Configuration management for the Nutrition Planner service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Nutrition provider (Spoonacular)
SPOONACULAR_API_KEY: Final[str] = os.getenv('SPOONACULAR_API_KEY', '')
SPOONACULAR_BASE_URL: Final[str] = os.getenv('SPOONACULAR_BASE_URL', 'https://api.spoonacular.com').rstrip('/')

# Fitness tracker provider
FITNESS_TRACKER_API_URL: Final[str] = os.getenv('FITNESS_TRACKER_API_URL', '').rstrip('/')

# Outbound calls
PROVIDER_TIMEOUT_SECONDS: Final[float] = float(os.getenv('PROVIDER_TIMEOUT_SECONDS', '5.0'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
