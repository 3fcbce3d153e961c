from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    COMPANY_NAME: str = "325 Guys Metal Buildings"
    COMPANY_EMAIL: str = "ben@325guys.com"
    COMPANY_PHONE: str = ""
    COMPANY_ADDRESS: str = ""

    # Finished quotes are addressed here; delivery itself is handled outside this app
    OWNER_EMAIL: str = "ben@325guys.com"

    QUOTE_VALID_DAYS: int = 30

    # In-memory sessions older than this are dropped when a new one starts
    SESSION_TTL_MINUTES: int = 240

    class Config:
        env_file = ".env"


settings = Settings()
