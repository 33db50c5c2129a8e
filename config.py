import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = os.getenv("TEMPLATES_DIR", str(BASE_DIR / "templates"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
REPORT_FILENAME_PREFIX = os.getenv("REPORT_FILENAME_PREFIX", "nutrition_plan")
