"""Подпись OBS V2 (HMAC-SHA1) для временных URL"""

import base64
import hashlib
import hmac

from obs_presign.errors import SigningFailureError

SIGNATURE_DIGEST_SIZE = 20


def sign_v2(secret_access_key: str, string_to_sign: str) -> str:
    """
    Подписывает строку ключом аккаунта.

    base64(HMAC-SHA1(secret, string_to_sign)) без переводов строк.

    Raises:
        SigningFailureError: Не удалось вычислить или закодировать подпись
    """
    try:
        digest = hmac.new(
            secret_access_key.encode("utf-8"),
            string_to_sign.encode("utf-8"),
            hashlib.sha1,
        ).digest()
    except (TypeError, ValueError) as e:
        raise SigningFailureError(f"не удалось вычислить HMAC-SHA1: {e}") from e

    if len(digest) != SIGNATURE_DIGEST_SIZE:
        raise SigningFailureError(
            f"неожиданный размер подписи: {len(digest)} байт"
        )

    encoded = base64.b64encode(digest).decode("ascii")
    # В URL подпись не должна содержать переводов строк
    return encoded.replace("\r", "").replace("\n", "")
