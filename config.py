from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Loan Records API"
    debug: bool = False

    database_url: str = "sqlite+aiosqlite:///./loan_management.db"
    cors_origins: str = "http://localhost:3000"

    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"

    bcrypt_rounds: int = 10
    # Older clients read the stored hash from the login payload.
    expose_password_hash: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
