SECRET_KEY = "test-secret"

# Tests never reach a real provider
SUMMARIZER_CONFIG = {
    "model": "gemini/gemini-2.5-flash",
    "api_key": None,
    "timeout": 2.0,
}

QR_TOKEN = "TEST_CHECKIN"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_DEMO_DATA = True
