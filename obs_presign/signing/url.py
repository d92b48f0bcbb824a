"""Сборка итогового временного URL"""

from obs_presign.errors import UrlTooLongError
from obs_presign.models.types import Protocol
from obs_presign.signing.buffer import BoundedBuffer
from obs_presign.signing.encoding import EncodedLengthExceeded, percent_encode
from obs_presign.signing.limits import MAX_TEMP_URL_LENGTH


def build_presigned_url(
    protocol: Protocol,
    host_name: str,
    canonical_resource: str,
    canonical_query: str,
    access_key: str,
    signature: str,
    max_size: int = MAX_TEMP_URL_LENGTH,
) -> str:
    """
    Собирает URL вида
    <scheme>://<host><resource>?<query>&AWSAccessKeyId=<id>&Signature=<sig>

    Идентификатор ключа вставляется как есть, подпись кодируется
    (base64 содержит "+", "/" и "=").

    Raises:
        UrlTooLongError: URL не помещается в max_size
    """
    scheme = "https://" if protocol == Protocol.HTTPS else "http://"
    buf = BoundedBuffer(max_size, UrlTooLongError, "временный URL")
    buf.append(scheme, host_name)
    buf.append(canonical_resource)
    if canonical_query:
        buf.append("?", canonical_query)
    buf.append("&AWSAccessKeyId=", access_key)
    try:
        encoded_signature = percent_encode(signature, max_size=buf.remaining)
    except EncodedLengthExceeded as e:
        raise UrlTooLongError(f"подпись: {e}") from e
    buf.append("&Signature=", encoded_signature)
    return buf.getvalue()
