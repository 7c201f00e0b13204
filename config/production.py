import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SHEET_CONFIG = {
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", ""),
    "apps_script_url": os.getenv("APPS_SCRIPT_URL", ""),
    "timeout": float(os.getenv("HTTP_TIMEOUT", "15")),
}

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
