import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SHEET_CONFIG = {
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", "1HMZM578cM93x6kF3GOZ_1e3byMYH4IOV0Q7xrl3XhuY"),
    # Leave the placeholder to simulate successful writes while developing.
    "apps_script_url": os.getenv(
        "APPS_SCRIPT_URL",
        "https://script.google.com/macros/s/AKfycbz_REPLACE_WITH_YOUR_DEPLOYED_ID/exec",
    ),
    "timeout": float(os.getenv("HTTP_TIMEOUT", "15")),
}

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
