from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "extra": "ignore",
        "env_prefix": "",
        "case_sensitive": False,
    }

    # Catalog
    catalog_path: str = ""  # empty = packaged colrvia/data/catalog.json

    # App
    environment: str = "development"
    log_level: str = "INFO"


settings = Settings()
