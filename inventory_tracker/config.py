"""
Configuration for the Inventory Tracker service.

Values are read from the environment (a local ``.env`` file is loaded first).
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Record store
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./inventory.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "False").lower() == "true"

# JWT settings (must match whatever issues the tokens)
SECRET_KEY = os.getenv("JWT_SECRET", "dev-secret-change-me")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Client
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
TIMEOUT = 5.0  # seconds
