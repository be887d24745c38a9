from pydantic_settings import BaseSettings, SettingsConfigDict


class CreditSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Load DEFAULT_CREDIT_PACKAGES / DEFAULT_DOCUMENT_COSTS when missing
    SEED_DEFAULT_CATALOG: bool = True
    # Development convenience; production schemas are managed outside this service
    CREATE_TABLES_ON_STARTUP: bool = False
    FREE_PACKAGE_CLAIMS_PER_MONTH: int = 1
