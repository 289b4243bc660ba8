# app/settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

load_dotenv(PROJECT_ROOT / ".env")

# SharePoint site and list holding the roster
SP_SITE_URL = os.getenv("SP_SITE_URL", "").rstrip("/")
SP_LIST_NAME = os.getenv("SP_LIST_NAME", "Employees")
SP_ACCESS_TOKEN = os.getenv("SP_ACCESS_TOKEN")  # bearer token, acquired elsewhere

# Bulk read asks for up to BULK_TOP rows; the paged fallback uses PAGE_SIZE
BULK_TOP = int(os.getenv("BULK_TOP", "5000"))
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "2000"))
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Bind address for the `employee-directory` console script
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
