# bocyields/settings.py
import os

# Bank of Canada Valet API, "bond_yields_all" observation group
BOC_DATA_URL = os.getenv(
    "BOC_DATA_URL",
    "https://www.banqueducanada.ca/valet/observations/group/bond_yields_all/json",
)
BOC_FETCH_TIMEOUT = float(os.getenv("BOC_FETCH_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# PRELOAD_BLOCKING=true  -> fetch the data before serving
# PRELOAD_BLOCKING=false -> start serving and fetch in a background thread
PRELOAD_BLOCKING = os.getenv("PRELOAD_BLOCKING", "true").lower() in ("1", "true", "yes")
