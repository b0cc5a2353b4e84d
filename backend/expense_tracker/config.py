import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./expenses.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
