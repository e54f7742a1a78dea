"""Configuration: env, remote catalog API, local storage paths."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of artpager package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so ARTPAGER_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = BASE_DIR / "data"
LOCAL_STORE_PATH = Path(os.getenv("ARTPAGER_LOCAL_STORE_PATH", str(DATA_DIR / "local_storage.json")))

# API
API_HOST = os.getenv("ARTPAGER_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("ARTPAGER_API_PORT", "8000"))

# Remote artwork catalog (Art Institute of Chicago public API)
ARTWORKS_API_URL = os.getenv("ARTPAGER_ARTWORKS_API_URL", "https://api.artic.edu/api/v1/artworks")
PAGE_SIZE = int(os.getenv("ARTPAGER_PAGE_SIZE", "12"))
REQUEST_TIMEOUT_SEC = float(os.getenv("ARTPAGER_REQUEST_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("ARTPAGER_LOG_LEVEL", "INFO").upper()


def ensure_data_dir() -> None:
    LOCAL_STORE_PATH.parent.mkdir(parents=True, exist_ok=True)
