"""Типы данных для генерации временных URL"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from obs_presign.errors import PresignStatus

DEFAULT_EXPIRES = 3600


class HttpMethod(str, Enum):
    """HTTP метод, который разрешает временный URL"""

    GET = "GET"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    POST = "POST"


class Protocol(str, Enum):
    """Протокол итогового URL"""

    HTTP = "http"
    HTTPS = "https"


class BucketContext(BaseModel):
    """Бакет, эндпоинт и учетные данные, от имени которых подписывается URL"""

    model_config = ConfigDict(frozen=True)

    bucket_name: str = ""
    host_name: str
    protocol: Protocol = Protocol.HTTPS
    access_key: Optional[str] = None
    # repr=False: секрет не должен попадать в логи через repr()
    secret_access_key: Optional[str] = Field(default=None, repr=False)


class PresignRequest(BaseModel):
    """Параметры одного временного URL"""

    model_config = ConfigDict(frozen=True)

    key: Optional[str] = None
    version_id: Optional[str] = None
    method: HttpMethod = HttpMethod.GET
    expires: int = DEFAULT_EXPIRES
    query_params: Tuple[Tuple[str, str], ...] = ()

    response_content_type: Optional[str] = None
    response_content_language: Optional[str] = None
    response_cache_control: Optional[str] = None
    response_content_disposition: Optional[str] = None
    response_content_encoding: Optional[str] = None
    response_expires: Optional[str] = None

    def effective_query_params(self) -> List[Tuple[str, str]]:
        """
        Возвращает пользовательские параметры запроса в порядке добавления в URL

        Явные query_params идут первыми в исходном порядке, за ними
        response-* переопределения в фиксированном порядке полей.
        """
        params = list(self.query_params)
        overrides = (
            ("response-content-type", self.response_content_type),
            ("response-content-language", self.response_content_language),
            ("response-cache-control", self.response_cache_control),
            ("response-content-disposition", self.response_content_disposition),
            ("response-content-encoding", self.response_content_encoding),
            ("response-expires", self.response_expires),
        )
        params.extend((name, value) for name, value in overrides if value is not None)
        return params


class PresignResult(BaseModel):
    """Результат генерации временного URL"""

    model_config = ConfigDict(frozen=True)

    status: PresignStatus
    url: Optional[str] = None
    expires_timestamp: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is PresignStatus.OK
