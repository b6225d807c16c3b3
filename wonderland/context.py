# wonderland/context.py
"""
앱 컨텍스트 - 요청 처리에 필요한 공유 의존성 묶음

create_app()이 설정값으로 한 번 만들어 app.state.context에 올려두고,
핸들러는 의존성(api/deps.py)을 통해 요청에서 꺼내 쓴다.
"""

from dataclasses import dataclass

from wonderland.config import Settings
from wonderland.services.auth_service import PasswordHasher, TokenService
from wonderland.services.database_service import DatabaseService
from wonderland.services.upload_service import UploadStore


@dataclass
class AppContext:
    settings: Settings
    database: DatabaseService
    tokens: TokenService
    passwords: PasswordHasher
    uploads: UploadStore


def build_context(settings: Settings) -> AppContext:
    return AppContext(
        settings=settings,
        database=DatabaseService(
            settings.sqlalchemy_url,
            pool_size=settings.db_pool_size,
            echo=settings.debug,
        ),
        tokens=TokenService(
            settings.resolve_jwt_secret(),
            algorithm=settings.jwt_algorithm,
            expires_days=settings.jwt_expires_days,
        ),
        passwords=PasswordHasher(rounds=settings.bcrypt_rounds),
        uploads=UploadStore(settings.upload_dir, settings.max_file_size),
    )
