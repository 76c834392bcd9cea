import os
from dotenv import load_dotenv

load_dotenv()

# Base dir: repository root
BASE_DIR = os.path.dirname(os.path.dirname(__file__))

DATABASE_FILE = os.getenv(
    "ACCOUNTS_DB_FILE", os.path.join(BASE_DIR, "storage", "database.json")
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
