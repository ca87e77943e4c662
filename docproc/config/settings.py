from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    server_host: str = "0.0.0.0"
    server_port: int = 8080

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "documents"
    db_username: str = "documents"
    db_password: str = "secret"

    minio_endpoint: str = "localhost:9000"
    minio_access_key: str = "minioadmin"
    minio_secret_key: str = "minioadmin"
    minio_use_ssl: bool = False
    minio_bucket: str = "documents"
    minio_region: str = "us-east-1"

    analyzer_provider: str = "openai"

    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60
    openai_max_retries: int = 3
    openai_retry_backoff_seconds: float = 1.0
    openai_max_tokens: int = 4000

    pdf_engine: str = "imagemagick"
    imagemagick_command: str = "convert"
    rasterizer_timeout_seconds: int = 120
    rasterizer_dpi: int = 150
