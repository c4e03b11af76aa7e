from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_allowed_origins: list[str] = ["http://localhost:3000"]

    database_url: str = ""
    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "resume_analyzer"
    db_username: str = "resume_analyzer"
    db_password: str = "secret"

    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"

    ai_provider: str = "openrouter"
    ai_api_key: str = ""
    ai_base_url: str = ""
    ai_model_name: str = "openai/gpt-3.5-turbo"
    ai_temperature: float = 0.7
    ai_timeout_seconds: int = 60
    ai_max_retries: int = 2

    pdf_engine: str = "pdfplumber"

    upload_dir: str = "/tmp/uploads"
    max_upload_bytes: int = 10 * 1024 * 1024
    default_job_role: str = "Frontend Developer"
