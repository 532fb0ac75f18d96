import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Simulated latency of the in-process store, in milliseconds
STORE_LATENCY_MS = int(os.getenv("STORE_LATENCY_MS", "100"))

# Load demo employees on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

TEXT_GENERATOR = os.getenv("TEXT_GENERATOR", "heuristic")
