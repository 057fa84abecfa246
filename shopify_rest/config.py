import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
    SHOPIFY_API_KEY = os.getenv("SHOPIFY_API_KEY", "")
    SHOPIFY_API_SECRET = os.getenv("SHOPIFY_API_SECRET", "")
    SHOPIFY_REDIRECT_URL = os.getenv("SHOPIFY_REDIRECT_URL", "")
    SHOPIFY_SCOPE = os.getenv("SHOPIFY_SCOPE", "read_orders")
    SHOPIFY_API_VERSION = os.getenv("SHOPIFY_API_VERSION", "2024-10")
    SHOPIFY_TIMEOUT = float(os.getenv("SHOPIFY_TIMEOUT", "60"))


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
