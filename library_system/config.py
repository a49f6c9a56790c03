import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Uygulama Ayarları
    app_name: str = os.getenv("APP_NAME", "Library System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # Günlük Ayarları
    log_level: str = os.getenv("LOG_LEVEL", "ERROR").upper()

    # CLI Ayarları
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()
    cli_config_dir: str = os.getenv("LIBRARY_CLI_CONFIG_DIR", str(Path.home() / ".library-cli"))


settings = Settings()
