# telemetry_normalizer/settings.py
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Payloads nested deeper than this are rejected instead of recursing further
MAX_DEPTH = int(os.getenv("NORMALIZER_MAX_DEPTH", "256"))

# Separator used by the `key` option, e.g. "system::cpu"
STATS_KEY_SEP = "::"

# Sole-key wrappers stripped by the reducer
SCAFFOLD_KEYS = ("nestedStats", "value", "description", "color")

# Prefixes removed from `entries` keys such as
# https://localhost/mgmt/tm/sys/tmm-info/0.0/stats
ENTRIES_HOST_PREFIX = "https://localhost/"
ENTRIES_PATH_PREFIXES = ("mgmt/tm/sys/", "mgmt/tm/")
