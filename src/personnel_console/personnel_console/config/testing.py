SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORE_LATENCY_MS = 0
SEED_DEMO_DATA = False

TEXT_GENERATOR = "heuristic"
