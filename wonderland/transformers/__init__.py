# wonderland/transformers/__init__.py
"""
변환 / 검증 계층

사용 예:
    from wonderland.transformers import inputs, outputs, validators
    wish = inputs.wish(body)
    return outputs.success(outputs.wish(record))
"""

from . import inputs, outputs, pagination, primitives, validators
from .pagination import create_pagination_meta, normalize_pagination

__all__ = [
    "inputs",
    "outputs",
    "pagination",
    "primitives",
    "validators",
    "create_pagination_meta",
    "normalize_pagination",
]
