"""Общие фикстуры для тестов генерации временных URL"""

import base64
import hashlib
import hmac
from typing import Callable, Iterator

import pytest

from obs_presign.models.types import BucketContext, Protocol
from obs_presign.utils.logging import SecretFilter

ACCESS_KEY = "AKIDEXAMPLE"
SECRET_KEY = "secret123"
BUCKET = "test-bucket"
HOST = "obs.example.com"
EXPIRES_AT = 1700000000
NOW = EXPIRES_AT - 3600


def expected_signature(secret: str, string_to_sign: str) -> str:
    """Подпись, вычисленная независимо от тестируемого кода."""
    digest = hmac.new(secret.encode(), string_to_sign.encode(), hashlib.sha1).digest()
    return base64.b64encode(digest).decode()


@pytest.fixture
def context() -> BucketContext:
    return BucketContext(
        bucket_name=BUCKET,
        host_name=HOST,
        protocol=Protocol.HTTPS,
        access_key=ACCESS_KEY,
        secret_access_key=SECRET_KEY,
    )


@pytest.fixture
def clock() -> Callable[[], float]:
    """Часы, зафиксированные так, что срок 3600 с дает EXPIRES_AT."""
    return lambda: float(NOW)


@pytest.fixture(autouse=True)
def _clear_secrets() -> Iterator[None]:
    yield
    SecretFilter.clear_secrets()
