"""
Client configuration management using Pydantic Settings.
Handles environment variables and default values for the client.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables (prefix ``AWATTAR_``).
    """
    
    # HTTP Configuration
    request_timeout: float = Field(default=30.0, description="Request timeout in seconds", gt=0)
    user_agent: str = Field(
        default="awattar-prices/0.3.0",
        description="User-Agent header sent with every request"
    )
    
    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json/text)")
    
    class Config:
        env_prefix = "AWATTAR_"
        env_file = ".env"
        env_file_encoding = "utf-8"


# Global settings instance
settings = Settings()
