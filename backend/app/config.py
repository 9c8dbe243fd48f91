import os

PORT = int(os.getenv("PORT", "5000"))
HOST = "0.0.0.0"

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./procurement_platform.db")

ALLOWED_ORIGINS = ["*"]
