from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="FORESTFILTER_")

    # When True, every filter call appends a HierarchyFilterMetrics record
    # Default: False (filter calls touch no shared state)
    record_filter_metrics: bool = False

    # When True, ArrayForest.from_sequences logs a warning per structural
    # violation (depth jumps, duplicate ids, ...). Never raises.
    check_forest_structure: bool = False


settings = Settings()
