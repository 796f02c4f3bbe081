from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Database settings
    database_url: str = Field(
        default="sqlite+aiosqlite:///./spaceport.db",
        description="Database connection URL",
    )

    # API settings
    api_prefix: str = Field(
        default="/rest", description="Base path for the ship catalog endpoints"
    )
    default_page_size: int = Field(
        default=3, gt=0, description="Page size used when pageSize is not given"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
