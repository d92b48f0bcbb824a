"""Конвейер канонизации и подписи временных URL"""

from obs_presign.signing.canonical import (
    build_canonical_query,
    build_canonical_resource,
    build_string_to_sign,
    method_name,
)
from obs_presign.signing.encoding import (
    EncodedLengthExceeded,
    percent_decode,
    percent_encode,
)
from obs_presign.signing.signer import sign_v2
from obs_presign.signing.url import build_presigned_url

__all__ = [
    "EncodedLengthExceeded",
    "build_canonical_query",
    "build_canonical_resource",
    "build_presigned_url",
    "build_string_to_sign",
    "method_name",
    "percent_decode",
    "percent_encode",
    "sign_v2",
]
