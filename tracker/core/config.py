from datetime import date

from pydantic_settings import BaseSettings, SettingsConfigDict

from tracker.services.records import DuplicateHours, PolicyConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "postgresql://tracker:tracker@db:5432/tracker"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Comma-separated allowed origins, or "*" to allow all.
    # Example: "https://myapp.com,https://api.myapp.com"
    CORS_ORIGINS: str = "*"

    # Certification policy
    MIN_ACTIVE_DAYS: int = 90
    MIN_AVERAGE_HOURS_PER_DAY: float = 3.0
    MAX_ALLOWED_GAP_DAYS: int = 3
    DUPLICATE_HOURS: DuplicateHours = DuplicateHours.sum

    # Defaults applied to interns imported from the program spreadsheet
    DEFAULT_JOINING_DATE: date = date(2024, 5, 1)
    DEFAULT_EMAIL_DOMAIN: str = "cial.org"

    @property
    def cors_origins_list(self) -> list[str]:
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def policy(self) -> PolicyConfig:
        return PolicyConfig(
            min_active_days=self.MIN_ACTIVE_DAYS,
            min_average_hours_per_day=self.MIN_AVERAGE_HOURS_PER_DAY,
            max_allowed_gap_days=self.MAX_ALLOWED_GAP_DAYS,
            duplicate_hours=self.DUPLICATE_HOURS,
        )


settings = Settings()
