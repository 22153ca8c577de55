# pos/config.py
from pathlib import Path

# Fixed settings. There are no environment variables and no config file.

HOST = "0.0.0.0"
PORT = 3000

# Served at "/" for any path the API does not claim.
STATIC_DIR = Path(__file__).resolve().parent.parent / "public"

# Development-mode CORS: anything goes, no credentials.
CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_METHODS = ["*"]
CORS_ALLOW_HEADERS = ["*"]
