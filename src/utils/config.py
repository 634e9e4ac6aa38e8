import os
from pathlib import Path
from dotenv import load_dotenv

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / 'data' / 'products.json'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

class Config:
    def __init__(self):
        # Load environment variables from .env file, overriding existing env vars
        load_dotenv(override=True)

        self.CATALOG_PATH = Path(os.getenv('CATALOG_PATH', str(DEFAULT_CATALOG_PATH)))

        # API server
        self.API_HOST = os.getenv('API_HOST', '0.0.0.0')
        self.API_PORT = int(os.getenv('API_PORT', '5001'))
        raw_debug_env = os.getenv('FLASK_DEBUG', 'False')
        self.FLASK_DEBUG = raw_debug_env.lower() == 'true'

        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

        self._validate_config()

    def _validate_config(self) -> None:
        """Validate the configuration values."""
        if not 0 < self.API_PORT < 65536:
            raise ValueError("API_PORT must be between 1 and 65535")

        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {self.LOG_LEVEL}")
