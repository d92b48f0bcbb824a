"""Строковый буфер с ограничением размера"""

from typing import List, Type

from obs_presign.errors import PresignError


class BoundedBuffer:
    """
    Накопитель строки с жестким лимитом размера в байтах UTF-8.

    append() проверяет остаток емкости до записи и при переполнении
    бросает ошибку заданного типа, ничего не дописывая. Возвращает self,
    поэтому добавления можно сцеплять: первая же неудача прерывает цепочку.
    """

    def __init__(self, max_size: int, error: Type[PresignError], what: str):
        """
        Args:
            max_size: Максимальный размер результата в байтах
            error: Тип ошибки, которая бросается при переполнении
            what: Название собираемой строки для текста ошибки
        """
        self._max_size = max_size
        self._error = error
        self._what = what
        self._parts: List[str] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def remaining(self) -> int:
        return self._max_size - self._size

    def append(self, *parts: str) -> "BoundedBuffer":
        size = sum(len(part.encode("utf-8")) for part in parts)
        if size > self.remaining:
            raise self._error(
                f"{self._what} превышает {self._max_size} байт "
                f"(нужно {self._size + size})"
            )
        self._parts.extend(parts)
        self._size += size
        return self

    def getvalue(self) -> str:
        return "".join(self._parts)
