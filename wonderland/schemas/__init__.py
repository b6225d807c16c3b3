# wonderland/schemas/__init__.py
"""
스키마 패키지 - 입력 DTO와 공통 타입
순환 import 방지를 위해 필요한 것만 노출
"""

# 기본적으로 자주 사용되는 스키마들만 노출
from .commons_schemas import Identity, PaginationParams

# 각 모듈별로 필요할 때 직접 import하도록 함
# from .user_schemas import UserRegistration, UserLogin
# from .wish_schemas import WishCreate
# from .todo_schemas import TodoCreate, TodoPatch
# from .gallery_schemas import GalleryImageCreate
