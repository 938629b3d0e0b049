from pydantic_settings import BaseSettings

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    db_host: str = "localhost"
    db_port: int = 54378
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "wealthtrack"
    debug: bool = True
    sql_echo: bool = False
    # JSON list in the environment, e.g. CORS_ORIGINS='["https://app.example.com"]'
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    # Analytics constants; parametric approximations, not load-bearing precision
    var_z_score: float = 1.645  # 95% one-tailed
    cvar_multiplier: float = 1.25
    days_per_year: int = 365
    risk_free_rate: float = 0.0  # Percent, subtracted in the Sharpe ratio

    @property
    def database_url(self) -> str:
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def analytics_constants(self) -> dict:
        return {
            "z_score": self.var_z_score,
            "cvar_multiplier": self.cvar_multiplier,
            "days_per_year": self.days_per_year,
            "risk_free_rate": self.risk_free_rate,
        }

    class Config:
        env_file = ".env"


settings = Settings()
