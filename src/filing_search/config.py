"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "FILING_SEARCH_", "env_file": ".env", "env_file_encoding": "utf-8"}

    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"

    frontend_url: str | None = None
    cors_origins: list[str] = ["http://localhost:3000"]

    # SEC asks every client to identify itself in the User-Agent header
    sec_user_agent: str = "SEC Filings Search (open-source-project)"
    company_tickers_url: str = "https://www.sec.gov/files/company_tickers.json"
    submissions_url: str = "https://data.sec.gov/submissions/CIK{cik}.json"
    request_timeout_seconds: float = 30.0

    @property
    def allowed_origins(self) -> list[str]:
        origins = list(self.cors_origins)
        if self.frontend_url and self.frontend_url not in origins:
            origins.append(self.frontend_url)
        return origins
