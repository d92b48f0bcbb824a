"""Генерация временных (presigned) URL для объектного хранилища OBS"""

from obs_presign.errors import PresignError, PresignStatus
from obs_presign.models.types import (
    BucketContext,
    HttpMethod,
    PresignRequest,
    PresignResult,
    Protocol,
)
from obs_presign.presigner import (
    ObsPresigner,
    presign,
    presign_delete,
    presign_get,
    presign_head,
    presign_put,
)

__all__ = [
    "BucketContext",
    "HttpMethod",
    "ObsPresigner",
    "PresignError",
    "PresignRequest",
    "PresignResult",
    "PresignStatus",
    "Protocol",
    "presign",
    "presign_delete",
    "presign_get",
    "presign_head",
    "presign_put",
]
