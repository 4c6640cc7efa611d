"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SUMMARIZER_MODEL = "gemini/gemini-2.5-flash"
DEFAULT_QR_TOKEN = "ATTENDIFY_CHECKIN"
EXPORT_HEADER = ("User", "Date", "Status", "Time", "Method")
