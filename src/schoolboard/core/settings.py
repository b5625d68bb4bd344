"""Runtime configuration for Schoolboard.

Values come from environment variables (or a ``.env`` file next to the
process). Only ``SECRET_KEY`` has no default.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings; field aliases are the variable names."""

    app_name: str = Field(default="Schoolboard", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Tokens and passwords
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )
    password_min_length: int = Field(default=6, alias="PASSWORD_MIN_LENGTH")
    # argon2id cost profile: "interactive", "moderate", or "min" (tests only)
    password_hash_strength: str = Field(default="interactive", alias="PASSWORD_HASH_STRENGTH")

    # Storage
    database_url: str = Field(default="sqlite:///./schoolboard.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Page view limits
    home_school_limit: int = Field(default=20, alias="HOME_SCHOOL_LIMIT")
    home_recent_post_limit: int = Field(default=10, alias="HOME_RECENT_POST_LIMIT")

    # Profile provisioning: suffixed retries before falling back to an id-derived name
    username_provision_attempts: int = Field(default=5, alias="USERNAME_PROVISION_ATTEMPTS")

    # Browser clients
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_database_url(self) -> str:
        """The URL the app and migrations connect to.

        ``TEST_DATABASE_URL`` replaces ``DATABASE_URL`` while
        ``USE_TEST_DATABASE`` is set.
        """
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url


settings = Settings()  # type: ignore[call-arg]
