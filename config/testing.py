SECRET_KEY = "test-secret"

SHEET_CONFIG = {
    "spreadsheet_id": "test-spreadsheet",
    "apps_script_url": "https://script.google.com/macros/s/test/exec",
    "timeout": 1.0,
}

GEMINI_API_KEY = ""
GEMINI_MODEL = "gemini-3-flash-preview"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
