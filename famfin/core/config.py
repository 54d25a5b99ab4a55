import os
from dotenv import load_dotenv

load_dotenv()  # loads .env into the environment

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./famfin.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))

CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "₹")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
