# wonderland/config.py
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import List, Optional

DEV_JWT_SECRET = "christmas-wonderland-dev-secret-key"

class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", extra="allow")

    # Runtime
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database (database_url overrides the MySQL parts when set)
    database_url: Optional[str] = None
    mysql_host: str = "localhost"
    mysql_port: int = 3306
    mysql_user: str = "root"
    mysql_password: str = ""
    mysql_database: str = "christmas_wonderland"
    db_pool_size: int = 10

    # Auth
    jwt_secret: Optional[str] = None
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    bcrypt_rounds: int = 10

    # Uploads
    max_file_size: int = 5 * 1024 * 1024
    upload_dir: str = "public/uploads"

    # Pagination
    default_page_limit: int = 20
    max_page_limit: int = 100

    cors_origins: List[str] = ["*"]
    seed_sample_data: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"mysql+aiomysql://{self.mysql_user}:{self.mysql_password}@{self.mysql_host}:{self.mysql_port}/{self.mysql_database}"

    def resolve_jwt_secret(self) -> str:
        """운영 환경에서는 JWT_SECRET 필수"""
        if self.jwt_secret:
            return self.jwt_secret
        if self.is_production:
            raise RuntimeError("JWT_SECRET must be set in production environment")
        return DEV_JWT_SECRET
