"""Configuration for the islandmap package."""

import os

from dotenv import load_dotenv

load_dotenv()

# Logging
LOG_LEVEL = os.environ.get("ISLANDMAP_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Island generation
DEFAULT_RADIUS = int(os.environ.get("ISLANDMAP_DEFAULT_RADIUS", "2"))

# Overlay defaults (enum values, see island_map.HexType / CityLevel)
DEFAULT_HEX_TYPE = "Desert"
DEFAULT_CITY_LEVEL = 0

# Saves
SAVE_INDENT = 2
