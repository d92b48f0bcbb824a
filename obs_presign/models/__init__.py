"""Модели данных"""

from obs_presign.models.types import (
    DEFAULT_EXPIRES,
    BucketContext,
    HttpMethod,
    PresignRequest,
    PresignResult,
    Protocol,
)

__all__ = [
    "DEFAULT_EXPIRES",
    "BucketContext",
    "HttpMethod",
    "PresignRequest",
    "PresignResult",
    "Protocol",
]
