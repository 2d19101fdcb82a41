import os
from dotenv import load_dotenv

load_dotenv()

VERSION = "0.1.0"


def boolean_env(key: str, default: bool = False) -> bool:
    if key not in os.environ:
        return default
    return os.getenv(key, "0").lower() in ("1", "true", "yes")


# API endpoints. Both must end with a trailing slash.
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com/")
GITHUB_UPLOAD_URL = os.getenv("GITHUB_UPLOAD_URL", "https://uploads.github.com/")
GITHUB_USER_AGENT = os.getenv("GITHUB_USER_AGENT", f"ghclient/{VERSION}")

# Applied by the transport; the client itself never times out
GITHUB_REQUEST_TIMEOUT = float(os.getenv("GITHUB_REQUEST_TIMEOUT", 30))

# Link header parsing bounds
MAX_LINK_HEADER_LENGTH = int(os.getenv("GITHUB_MAX_LINK_HEADER_LENGTH", 8192))
MAX_LINK_ENTRIES = int(os.getenv("GITHUB_MAX_LINK_ENTRIES", 32))

LOG_REQUESTS = boolean_env("GITHUB_LOG_REQUESTS", False)
