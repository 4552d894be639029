from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GitHub API
    github_api_url: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"

    # Organization queried when the request omits ?org=
    default_org: str = "vuori-clothing"
    # Repositories eligible for aggregation (matched case-insensitively)
    target_repositories: list[str] = ["cascade", "alpine", "switchbacks", "tamarack"]

    # Stats cache - repository stats don't change frequently
    stats_cache_ttl_seconds: int = 3600  # 1 hour
    stats_cache_maxsize: int = 1024

    # Collection pacing: at most stats_batch_size repos in flight at once
    stats_batch_size: int = 5
    stats_batch_delay_seconds: float = 0.1

    # Cost bounds per repository (high-volume repos are under-counted)
    commits_per_page: int = 100
    max_commit_pages: int = 3
    max_commits_per_page: int = 20

    # Window used when ?since= is omitted
    stats_lookback_days: int = 30

    @property
    def target_repository_set(self) -> frozenset[str]:
        """Lowercased allow-list for name matching."""
        return frozenset(name.lower() for name in self.target_repositories)


settings = Settings()
