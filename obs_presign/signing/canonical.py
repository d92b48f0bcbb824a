"""Канонический ресурс, канонический query string и строка для подписи"""

from typing import Iterable, Optional, Tuple

from obs_presign.errors import (
    InvalidInputError,
    QueryTooLongError,
    ResourceTooLongError,
    StringToSignTooLongError,
)
from obs_presign.models.types import HttpMethod
from obs_presign.signing.buffer import BoundedBuffer
from obs_presign.signing.encoding import EncodedLengthExceeded, percent_encode
from obs_presign.signing.limits import (
    MAX_CANONICALIZED_RESOURCE_SIZE,
    MAX_QUERY_STRING_SIZE,
    MAX_STRING_TO_SIGN_SIZE,
)


def build_canonical_resource(
    bucket_name: Optional[str],
    key: str,
    max_size: int = MAX_CANONICALIZED_RESOURCE_SIZE,
) -> str:
    """
    Строит канонический путь ресурса.

    Имя бакета вставляется как есть, кодируется только ключ объекта
    (с сохранением "/"). Без бакета ресурс равен "/".

    Args:
        bucket_name: Имя бакета (пустое: подпись на уровне аккаунта)
        key: Ключ объекта, непустой
        max_size: Лимит длины пути в байтах

    Returns:
        Канонический ресурс, например "/bucket/dir/a%20b.txt"

    Raises:
        ResourceTooLongError: Путь не помещается в max_size
    """
    buf = BoundedBuffer(max_size, ResourceTooLongError, "канонический ресурс")
    buf.append("/")
    if not bucket_name:
        return buf.getvalue()

    buf.append(bucket_name, "/")
    try:
        encoded_key = percent_encode(key, max_size=buf.remaining, preserve_slash=True)
    except EncodedLengthExceeded as e:
        raise ResourceTooLongError(f"ключ объекта: {e}") from e
    buf.append(encoded_key)
    return buf.getvalue()


def build_canonical_query(
    expires_timestamp: int,
    version_id: Optional[str] = None,
    query_params: Iterable[Tuple[str, str]] = (),
    max_size: int = MAX_QUERY_STRING_SIZE,
) -> str:
    """
    Строит канонический query string.

    Порядок фиксирован: Expires, затем versionId (если задан), затем
    пользовательские параметры в переданном порядке. Дубликаты имен
    не проверяются.

    Raises:
        QueryTooLongError: Строка не помещается в max_size
    """
    buf = BoundedBuffer(max_size, QueryTooLongError, "query string")
    buf.append("Expires=", str(expires_timestamp))

    try:
        if version_id:
            buf.append("&versionId=", percent_encode(version_id, max_size=buf.remaining))
        for name, value in query_params:
            buf.append(
                "&",
                percent_encode(name, max_size=buf.remaining),
                "=",
                percent_encode(value, max_size=buf.remaining),
            )
    except EncodedLengthExceeded as e:
        raise QueryTooLongError(f"параметр запроса: {e}") from e

    return buf.getvalue()


def method_name(method: HttpMethod) -> str:
    """Текстовое имя HTTP метода для строки подписи"""
    match method:
        case HttpMethod.GET:
            return "GET"
        case HttpMethod.PUT:
            return "PUT"
        case HttpMethod.DELETE:
            return "DELETE"
        case HttpMethod.HEAD:
            return "HEAD"
        case HttpMethod.POST:
            return "POST"
        case _:
            raise InvalidInputError(f"неизвестный HTTP метод: {method!r}")


def build_string_to_sign(
    method: HttpMethod,
    expires_timestamp: int,
    canonical_resource: str,
    max_size: int = MAX_STRING_TO_SIGN_SIZE,
) -> str:
    """
    Собирает строку для подписи: "<VERB>\\n<Expires>\\n<CanonicalResource>".

    Content-Type и Content-MD5 в подписываемые данные не входят.

    Raises:
        StringToSignTooLongError: Строка не помещается в max_size
    """
    buf = BoundedBuffer(max_size, StringToSignTooLongError, "строка для подписи")
    buf.append(method_name(method), "\n")
    buf.append(str(expires_timestamp), "\n")
    buf.append(canonical_resource)
    return buf.getvalue()
