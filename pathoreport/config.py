from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite:///./pathoreport.db"
    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    allowed_origins: str = "http://localhost:5173"

    storage_key: str = "pathoreport_reports"
    seed_sample_data: bool = True
    default_collected_by: str = "Lab Technician"
    recent_reports_limit: int = 5
    backup_filename_prefix: str = "pathoreport-backup"
    csv_filename: str = "lab-reports.csv"


settings = Settings()
