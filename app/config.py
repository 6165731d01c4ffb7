from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Warehouse Inventory API"
    ENVIRONMENT: str = "development"  # development, test, production
    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Tokens
    JWT_SECRET: str = "change-me-jwt-secret"
    JWT_REFRESH_SECRET: str = "change-me-refresh-secret"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    BCRYPT_ROUNDS: int = 10

    # Load the demo warehouses/products/users on startup
    SEED_MOCK_DATA: bool = True

    # Pagination
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100

    # Rate limiting (skipped when ENVIRONMENT == "test")
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_WINDOW_MINUTES: int = 15
    RATE_LIMIT_MAX_REQUESTS: int = 100
    AUTH_RATE_LIMIT_MAX: int = 5
    REPORT_RATE_LIMIT_MAX: int = 10  # per hour

    model_config = {"env_file": ".env"}


settings = Settings()
