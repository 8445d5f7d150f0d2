"""Configuration management for the Lesson Planner application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '3001'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Remote API (used by the persistence gateway)
API_URL: Final[str] = os.getenv('LESSON_API_URL', 'http://localhost:3001/api').rstrip('/')
API_TIMEOUT: Final[float] = float(os.getenv('LESSON_API_TIMEOUT', '10'))
API_RETRIES: Final[int] = int(os.getenv('LESSON_API_RETRIES', '3'))

# Weekly grid layout
GRID_START_HOUR: Final[int] = int(os.getenv('GRID_START_HOUR', '8'))
GRID_END_HOUR: Final[int] = int(os.getenv('GRID_END_HOUR', '16'))
PIXELS_PER_HOUR: Final[int] = int(os.getenv('PIXELS_PER_HOUR', '80'))
MIN_SLOT_HEIGHT: Final[int] = int(os.getenv('MIN_SLOT_HEIGHT', '28'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('LESSON_DATA_DIR', str(BASE_DIR / 'data')))
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
