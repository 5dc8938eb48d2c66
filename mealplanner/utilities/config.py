"""Configuration management for the meal planning engine."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Identifier generation
PLANNER_ID_PREFIX: Final[str] = os.getenv('PLANNER_ID_PREFIX', 'planner')

# Activity log ring buffer size
ACTIVITY_LOG_MAX_EVENTS: Final[int] = int(os.getenv('ACTIVITY_LOG_MAX_EVENTS', '300'))
