# server/config.py

import os
from datetime import timedelta
from dotenv import load_dotenv


load_dotenv()


# -------------------------------
# Authentication
# -------------------------------

JWT_SECRET_KEY: str = os.getenv("JWT_SECRET_KEY", "")
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE = timedelta(days=1)

BCRYPT_ROUNDS = 10


# -------------------------------
# Database
# -------------------------------

DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./data/app.db")


# -------------------------------
# HTTP / Logging
# -------------------------------

CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
