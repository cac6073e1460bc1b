import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

PAYSTACK_BASE_URL = "https://api.paystack.co"


class Settings:
    def __init__(self):
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3000"))
        self.paystack_api_key: str = os.getenv("PAYSTACK_API_KEY", "")
        self.paystack_base_url: str = os.getenv("PAYSTACK_BASE_URL", PAYSTACK_BASE_URL)
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
