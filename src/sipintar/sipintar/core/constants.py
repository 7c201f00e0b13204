"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SHEET_TEACHERS = "Data Guru"
SHEET_STUDENTS = "Data Siswa"
SHEET_ATTENDANCE = "Data Kehadiran"

LESSON_HOURS = tuple(str(i) for i in range(1, 11))

ALL = "all"

LAST_DAYS_WINDOW = 7
SUMMARY_RECORD_LIMIT = 50
DEFAULT_HTTP_TIMEOUT = 15

RECORD_DATE_FORMAT = "%d/%m/%Y"

# Apps Script URL shipped before a real deployment is configured.
APPS_SCRIPT_PLACEHOLDER = "REPLACE_WITH_YOUR_DEPLOYED_ID"
