from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, computed_field

# Load .env file from project root
load_dotenv()


class Settings(BaseSettings):
    """Base settings for the application."""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "Content Categorizer"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Recommends classification values for new content from previously classified entries"
    APP_AUTHOR: str = "Content Categorizer Development Team"

    # Recommendation engine settings
    SIMILARITY_FLOOR: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Corpus records must score strictly above this similarity to count as a match",
    )
    AUTO_APPLY_THRESHOLD: int = Field(
        default=30,
        ge=0,
        description="Top recommendations must score strictly above this confidence to be auto-applied",
    )
    INSIGHTS_LIMIT: int = Field(default=3, ge=1, description="Number of similar records shown in pattern insights")

    # Reference data
    CATALOG_PATH: str = Field(
        default="",
        description="Optional JSON file with category definitions and historical corpus (embedded catalog when empty)",
    )

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    @computed_field
    @property
    def effective_catalog_path(self) -> str:
        """Resolve the catalog file path, or "" to use the embedded catalog."""
        if self.CATALOG_PATH and self.CATALOG_PATH.strip():
            return self.CATALOG_PATH.strip()
        return ""


settings = Settings()
