"""
Configuration
=============
Environment-driven settings shared by the API, the vision client and the
report pipeline.
"""

import logging
import os

# ═══════════════════════════════════════════════════════════════════════════════
# VISION MODEL
# ═══════════════════════════════════════════════════════════════════════════════

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4-vision-preview")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "60"))

# ═══════════════════════════════════════════════════════════════════════════════
# REPORTS
# ═══════════════════════════════════════════════════════════════════════════════

# TTF fonts with Arabic coverage; Helvetica is used when unset
REPORT_FONT_PATH = os.getenv("REPORT_FONT_PATH", "")
REPORT_BOLD_FONT_PATH = os.getenv("REPORT_BOLD_FONT_PATH", "")
REPORT_OUTPUT_DIR = os.getenv("REPORT_OUTPUT_DIR", "reports")

# ═══════════════════════════════════════════════════════════════════════════════
# SERVER
# ═══════════════════════════════════════════════════════════════════════════════

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3020"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def setup_logging() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s │ %(levelname)s │ %(message)s',
        datefmt='%H:%M:%S'
    )
