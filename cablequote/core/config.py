# cablequote/core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# -----------------------
# Database Config
# -----------------------
DB_TYPE = os.getenv("DB_TYPE", "sqlite").lower()

if DB_TYPE == "postgres":
    DATABASE_URL = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL is required for Postgres setup")
elif DB_TYPE == "sqlite":
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./quotations.db")
else:
    raise ValueError(f"Unsupported DB_TYPE: {DB_TYPE}")

# -----------------------
# JWT Config
# -----------------------
JWT_SECRET = os.getenv("JWT_SECRET")
if not JWT_SECRET:
    raise ValueError("JWT_SECRET environment variable must be set")

JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
ADMIN_ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ADMIN_ACCESS_TOKEN_EXPIRE_MINUTES", "120"))

# -----------------------
# App Config
# -----------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# Letterhead printed on quotation documents
COMPANY_NAME = os.getenv("COMPANY_NAME", "Siddhi Kabel Corporation Pvt Ltd")
COMPANY_ADDRESS = os.getenv("COMPANY_ADDRESS", "# 3, 1st Main, 1st Block, B S K 3rd Stage, BENGALURU-560085.")
COMPANY_CONTACT = os.getenv("COMPANY_CONTACT", "Tel: 080-26720440 / Mob: 9620000947 | E-Mail: info@siddhikabel.com")
COMPANY_GSTIN = os.getenv("COMPANY_GSTIN", "29AAMCS4385H1ZQ")
QUOTATION_NUMBER_PREFIX = os.getenv("QUOTATION_NUMBER_PREFIX", "SKC/QTN/")
