import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_LATENCY_MS = int(os.getenv("STORE_LATENCY_MS", "0"))
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

TEXT_GENERATOR = os.getenv("TEXT_GENERATOR", "heuristic")
