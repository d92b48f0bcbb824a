"""Генерация временных (presigned) URL для объектов OBS"""

import logging
import time
from typing import Callable, Optional, Tuple

from pydantic import ValidationError

from obs_presign.errors import (
    InvalidInputError,
    MissingCredentialError,
    PresignError,
    PresignStatus,
)
from obs_presign.models.types import (
    DEFAULT_EXPIRES,
    BucketContext,
    HttpMethod,
    PresignRequest,
    PresignResult,
)
from obs_presign.signing.canonical import (
    build_canonical_query,
    build_canonical_resource,
    build_string_to_sign,
)
from obs_presign.signing.signer import sign_v2
from obs_presign.signing.url import build_presigned_url

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def _ensure_utf8(what: str, value: Optional[str]) -> None:
    if value is None:
        return
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInputError(f"{what} не кодируется в UTF-8: {e.reason}") from e


def _validate(context: Optional[BucketContext], request: Optional[PresignRequest]) -> None:
    """Проверяет входные данные до начала подписи"""
    if context is None or request is None:
        raise InvalidInputError("не заданы параметры бакета или запроса")
    if not request.key:
        raise InvalidInputError("ключ объекта обязателен")
    if isinstance(request.expires, bool) or not isinstance(request.expires, int):
        raise InvalidInputError(f"срок действия должен быть целым: {request.expires!r}")
    if request.expires < 1:
        raise InvalidInputError(f"срок действия должен быть >= 1 с: {request.expires}")
    if not isinstance(request.method, HttpMethod):
        raise InvalidInputError(f"неизвестный HTTP метод: {request.method!r}")
    if not context.host_name:
        raise InvalidInputError("имя хоста обязательно")
    for param in request.query_params:
        if len(param) != 2 or not all(isinstance(part, str) for part in param):
            raise InvalidInputError(f"параметр запроса требует имя и значение: {param!r}")

    texts = [
        ("ключ объекта", request.key),
        ("versionId", request.version_id),
        ("имя бакета", context.bucket_name),
        ("имя хоста", context.host_name),
        ("access key", context.access_key),
    ]
    for name, value in request.effective_query_params():
        texts.append(("имя параметра запроса", name))
        texts.append((f"значение параметра {name!r}", value))
    for what, text in texts:
        _ensure_utf8(what, text)

    if not context.access_key or not context.secret_access_key:
        raise MissingCredentialError("не заданы access key и/или secret access key")


def _create_presigned_url(
    context: BucketContext, request: PresignRequest, clock: Clock
) -> Tuple[str, int]:
    """Проводит запрос через все стадии конвейера и возвращает (url, expires)"""
    _validate(context, request)

    expires_timestamp = int(clock()) + request.expires

    stage = "resource"
    try:
        resource = build_canonical_resource(context.bucket_name, request.key)
        stage = "query"
        query = build_canonical_query(
            expires_timestamp,
            request.version_id,
            request.effective_query_params(),
        )
        stage = "string_to_sign"
        string_to_sign = build_string_to_sign(request.method, expires_timestamp, resource)
        stage = "signature"
        signature = sign_v2(context.secret_access_key, string_to_sign)
        stage = "url"
        url = build_presigned_url(
            context.protocol,
            context.host_name,
            resource,
            query,
            context.access_key,
            signature,
        )
    except PresignError as e:
        logger.error(f"Ошибка на этапе {stage}: {e}")
        raise

    logger.info(
        f"Сгенерирован временный URL: {request.method.value} {request.key} "
        f"(истекает {expires_timestamp})"
    )
    return url, expires_timestamp


def presign(
    context: Optional[BucketContext],
    request: Optional[PresignRequest],
    clock: Clock = time.time,
) -> PresignResult:
    """
    Генерирует временный URL для одной операции над объектом

    Args:
        context: Бакет, хост, протокол и учетные данные
        request: Ключ объекта, метод, срок действия и доп. параметры
        clock: Источник текущего времени в секундах эпохи

    Returns:
        PresignResult: при успехе содержит URL и абсолютное время истечения,
        иначе статус ошибки и сообщение
    """
    try:
        url, expires_timestamp = _create_presigned_url(context, request, clock)
    except PresignError as e:
        if isinstance(e, (InvalidInputError, MissingCredentialError)):
            logger.error(f"Некорректные параметры временного URL: {e}")
        return PresignResult(status=e.status, error_message=str(e))

    return PresignResult(
        status=PresignStatus.OK,
        url=url,
        expires_timestamp=expires_timestamp,
    )


def _presign_with_method(
    context: Optional[BucketContext],
    key: Optional[str],
    expires: int,
    method: HttpMethod,
    query_params: Tuple[Tuple[str, str], ...] = (),
    clock: Clock = time.time,
) -> Tuple[PresignStatus, Optional[str]]:
    try:
        request = PresignRequest(
            key=key, expires=expires, method=method, query_params=query_params
        )
    except ValidationError as e:
        logger.error(f"Некорректные параметры временного URL: {e}")
        return PresignStatus.INVALID_INPUT, None

    result = presign(context, request, clock=clock)
    return result.status, result.url


def presign_get(
    context: Optional[BucketContext],
    key: Optional[str],
    expires: int = DEFAULT_EXPIRES,
    clock: Clock = time.time,
) -> Tuple[PresignStatus, Optional[str]]:
    """Временный URL для скачивания объекта"""
    return _presign_with_method(context, key, expires, HttpMethod.GET, clock=clock)


def presign_put(
    context: Optional[BucketContext],
    key: Optional[str],
    expires: int = DEFAULT_EXPIRES,
    content_type: Optional[str] = None,
    clock: Clock = time.time,
) -> Tuple[PresignStatus, Optional[str]]:
    """
    Временный URL для загрузки объекта

    content_type передается параметром запроса Content-Type,
    в подписываемые данные он не входит.
    """
    query_params: Tuple[Tuple[str, str], ...] = ()
    if content_type:
        query_params = (("Content-Type", content_type),)
    return _presign_with_method(
        context, key, expires, HttpMethod.PUT, query_params=query_params, clock=clock
    )


def presign_delete(
    context: Optional[BucketContext],
    key: Optional[str],
    expires: int = DEFAULT_EXPIRES,
    clock: Clock = time.time,
) -> Tuple[PresignStatus, Optional[str]]:
    """Временный URL для удаления объекта"""
    return _presign_with_method(context, key, expires, HttpMethod.DELETE, clock=clock)


def presign_head(
    context: Optional[BucketContext],
    key: Optional[str],
    expires: int = DEFAULT_EXPIRES,
    clock: Clock = time.time,
) -> Tuple[PresignStatus, Optional[str]]:
    """Временный URL для получения метаданных объекта"""
    return _presign_with_method(context, key, expires, HttpMethod.HEAD, clock=clock)


class ObsPresigner:
    """Генератор временных URL для одного бакета"""

    def __init__(self, context: BucketContext, clock: Clock = time.time):
        """
        Инициализация генератора

        Args:
            context: Бакет, хост, протокол и учетные данные
            clock: Источник текущего времени (в тестах фиксированный)
        """
        self._context = context
        self._clock = clock

    @property
    def context(self) -> BucketContext:
        return self._context

    def presign(self, request: PresignRequest) -> PresignResult:
        return presign(self._context, request, clock=self._clock)

    def generate_presigned_url(
        self,
        key: str,
        method: HttpMethod = HttpMethod.GET,
        expiration: int = DEFAULT_EXPIRES,
        version_id: Optional[str] = None,
        query_params: Tuple[Tuple[str, str], ...] = (),
    ) -> str:
        """
        Генерирует временный URL для объекта

        Args:
            key: Ключ объекта
            method: HTTP метод, который разрешает URL
            expiration: Время жизни URL в секундах (по умолчанию 1 час)
            version_id: Версия объекта (опционально)
            query_params: Дополнительные параметры запроса (имя, значение)

        Returns:
            Временный URL

        Raises:
            PresignError: Подпись не удалась; тип ошибки соответствует статусу
        """
        try:
            request = PresignRequest(
                key=key,
                method=method,
                expires=expiration,
                version_id=version_id,
                query_params=query_params,
            )
        except ValidationError as e:
            raise InvalidInputError(f"некорректные параметры запроса: {e}") from e
        url, _ = _create_presigned_url(self._context, request, self._clock)
        logger.debug(f"Сгенерирован presigned URL для {key}")
        return url
