"""Percent-encoding для канонических строк и URL"""

from typing import Optional, Union
from urllib.parse import quote, unquote_to_bytes


class EncodedLengthExceeded(ValueError):
    """Закодированное значение не помещается в отведенный размер"""

    def __init__(self, encoded_length: int, max_size: int):
        super().__init__(
            f"закодированная длина {encoded_length} превышает лимит {max_size}"
        )
        self.encoded_length = encoded_length
        self.max_size = max_size


def percent_encode(
    value: Union[str, bytes],
    max_size: Optional[int] = None,
    preserve_slash: bool = False,
) -> str:
    """
    URI-encode: нерезервированные символы (A-Z a-z 0-9 - _ . ~) не трогаем,
    остальное в %XX (uppercase)

    Args:
        value: Кодируемое значение; str кодируется в UTF-8
        max_size: Максимальная длина результата (None: без ограничения)
        preserve_slash: Оставлять "/" как есть (ключ объекта в пути)

    Returns:
        Закодированная строка

    Raises:
        EncodedLengthExceeded: Результат длиннее max_size
        UnicodeEncodeError: str не кодируется в UTF-8
    """
    safe = "/" if preserve_slash else ""
    # quote() сам кодирует str в UTF-8 и принимает bytes как есть
    encoded = quote(value, safe=safe)
    if max_size is not None and len(encoded) > max_size:
        raise EncodedLengthExceeded(len(encoded), max_size)
    return encoded


def percent_decode(value: str) -> bytes:
    """Обратное преобразование к percent_encode: возвращает исходные байты"""
    return unquote_to_bytes(value)
