import os
from pathlib import Path

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
DB_PATH = Path(os.environ.get("BUOY_RULES_DB", DATA_DIR / "buoy_rules.duckdb"))
STATIONS_JSON = DATA_DIR / "buoy_stations.json"

# The radius of the Earth in miles (spherical approximation)
EARTH_RADIUS_MILES = 3963.192

# Tampa rule: buoys within 30 miles of Clearwater, FL
# https://maps.google.com/maps?q=27.945886,-82.798676&z=10
TAMPA_LATITUDE = 27.945886
TAMPA_LONGITUDE = -82.798676
TAMPA_MAX_RADIUS_MILES = 30.0
TAMPA_MAX_AVG_WIND_SPEED = 15.0  # miles/hour
