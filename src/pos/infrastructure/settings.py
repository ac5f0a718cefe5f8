"""Runtime settings read from the environment (and an optional .env file)."""

import os

from dotenv import load_dotenv

load_dotenv()

SHIPPING_FEE = os.getenv("POS_SHIPPING_FEE", "30")
LOG_LEVEL = os.getenv("POS_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("POS_LOG_FILE") or None
