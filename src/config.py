from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MORTGAGE_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Display
    currency_symbol: str = "$"
    default_mortgage_type: str = "repayment"  # or "interest-only"


settings = Settings()
