"""Fixed connection constants for the Autotrade Integration Service.

These are not exposed through Settings: the bridge always talks to the
local integration service.
"""

# Base URL for Autotrade Integration Service
AUTOTRADE_API_BASE = "http://localhost:8001"

# HTTP timeout for API calls (in seconds)
HTTP_TIMEOUT_SECS = 60

SERVICE_NAME = "autotrade-bridge"
SERVICE_VERSION = "1.0.0"
