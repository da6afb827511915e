import os
from dotenv import load_dotenv

load_dotenv()  # reads .env from the working directory if present

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///gomoku.db")

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE")

DEFAULT_ROWS = int(os.getenv("BOARD_ROWS", "15"))
DEFAULT_COLUMNS = int(os.getenv("BOARD_COLUMNS", "15"))
LINE_LENGTH = int(os.getenv("LINE_LENGTH", "5"))
