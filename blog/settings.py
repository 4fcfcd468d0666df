from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    debug: bool = False
    app_name: str
    aws_access_key_id: str
    aws_secret_access_key: str
    aws_region: str = Field(alias="AWS_DEFAULT_REGION")
    jwt_algorithm: str = "HS256"
    jwt_secret: str
    stage: str

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
