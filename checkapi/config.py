import os
from dotenv import load_dotenv

load_dotenv()

# Server
API_PORT = int(os.getenv("API_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
LOG_JSON = os.getenv("LOG_JSON", "true").lower() == "true"

# Zones served by this registry - comma-separated, e.g. "example,co.example"
MANAGED_TLDS = [
    tld.strip().lower().rstrip(".")
    for tld in os.getenv("MANAGED_TLDS", "example").split(",")
    if tld.strip()
]

# Check API session defaults
CHECK_API_CLIENT_ID = os.getenv("CHECK_API_CLIENT_ID", "checkapi")
CHECK_API_TRID_LABEL = os.getenv("CHECK_API_TRID_LABEL", "CheckApiAction")

# Flow runner (protocol execution engine adapter)
FLOW_RUNNER = os.getenv("FLOW_RUNNER", "http")  # only "http" for now
EPP_ENDPOINT_URL = os.getenv("EPP_ENDPOINT_URL", "")  # EPP-over-HTTP tool endpoint
EPP_ENDPOINT_TOKEN = os.getenv("EPP_ENDPOINT_TOKEN", "")  # Optional bearer token
EPP_TIMEOUT = int(os.getenv("EPP_TIMEOUT", "30"))
