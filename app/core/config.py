from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    app_name: str = "Employee Directory API"
    api_version: str = "v1"
    host: str = "0.0.0.0"
    port: int = 8080
    seed_sample_data: bool = True
    log_level: str = "INFO"
    data_dir: Path = Path(__file__).resolve().parents[2] / "data"


settings = Settings()
