"""
StringBuilder — текстовый аккумулятор

Переопределяет контракт NumericBuilder строковой семантикой:
- add / plus: конкатенация str() всех аргументов
- subtract / minus: удаление n последних символов
- multiply: повтор строки times раз
- divide: усечение до первых floor(len / divisor) символов
Добавляет:
- remove: удаление всех вхождений подстроки (повторный поиск первого вхождения)
- sub: вырезание окна length символов с позиции start_position (с 1)

Невалидные аргументы: no-op с диагностикой.
"""

import math
import sys
from typing import Any, ClassVar, Optional

from src.builders.base import BaseBuilder
from src.builders.config import BuilderConfig
from src.core.domain.diagnostic import DiagnosticCode
from src.core.domain.snapshot import BuilderKind
from src.core.math.numerical_safeguards import (
    clamp,
    exact_quotient,
    is_integer_number,
    is_real_number,
    is_valid_float,
)


class StringBuilder(BaseBuilder):
    """Текстовый fluent-аккумулятор.

    Examples:
        >>> StringBuilder("Hello").add(" all", "!").subtract(4).multiply(3).get()
        'Hello Hello Hello '
    """

    KIND: ClassVar[BuilderKind] = BuilderKind.TEXT

    def __init__(self, text: Any = "", *, config: Optional[BuilderConfig] = None):
        super().__init__(str(text), config=config)

    def add(self, *parts: Any) -> "StringBuilder":
        """Конкатенация текстового представления каждого аргумента."""
        self.value += "".join(str(part) for part in parts)
        return self

    def plus(self, *parts: Any) -> "StringBuilder":
        return self.add(*parts)

    def subtract(self, count: Any = 0) -> "StringBuilder":
        """
        Удаление count последних символов.

        count > len(value) → пустая строка.
        Диагностика: count не целое неотрицательное число.
        """
        if not is_integer_number(count) or count < 0:
            return self._reject(
                "subtract",
                DiagnosticCode.INVALID_ARGUMENT,
                f"count must be a non-negative integer, got {count!r}",
                count,
            )

        keep = clamp(len(self.value) - int(count), min_value=0)
        self.value = self.value[:keep]
        return self

    def minus(self, count: Any = 0) -> "StringBuilder":
        return self.subtract(count)

    def multiply(self, times: Any) -> "StringBuilder":
        """
        Повтор value times раз.

        Дробная часть times отбрасывается (усечение к нулю), 0 → "".
        Диагностика: times не конечное число, times < 0 или результат
        длиннее sys.maxsize символов.
        """
        if not is_real_number(times) or not is_valid_float(times):
            return self._reject(
                "multiply",
                DiagnosticCode.INVALID_ARGUMENT,
                f"times must be a finite number, got {times!r}",
                times,
            )

        if times < 0:
            return self._reject(
                "multiply",
                DiagnosticCode.INVALID_ARGUMENT,
                f"times must be non-negative, got {times!r}",
                times,
            )

        count = int(times)

        # Пустая строка остаётся пустой при любом count
        if not self.value:
            return self

        if count > sys.maxsize // len(self.value):
            return self._reject(
                "multiply",
                DiagnosticCode.INVALID_ARGUMENT,
                f"times is too large to repeat {len(self.value)} characters, got {times!r}",
                times,
            )

        self.value = self.value * count
        return self

    def divide(self, divisor: Any) -> "StringBuilder":
        """
        Усечение value до первых floor(len(value) / divisor) символов.

        Длина клампится в [0, len(value)]: отрицательный divisor → "",
        0 < divisor < 1 → без изменений.
        Диагностики: divisor не конечное число (INVALID_ARGUMENT), divisor == 0
        (DIVISION_BY_ZERO).
        """
        if not is_real_number(divisor) or not is_valid_float(divisor):
            return self._reject(
                "divide",
                DiagnosticCode.INVALID_ARGUMENT,
                f"divisor must be a finite number, got {divisor!r}",
                divisor,
            )

        if divisor == 0:
            return self._reject(
                "divide", DiagnosticCode.DIVISION_BY_ZERO, "Cannot divide by zero!", divisor
            )

        length = len(self.value)
        quotient = exact_quotient(length, divisor)

        # Исчезающе малый divisor даёт ±inf: это граница клампа
        if not is_valid_float(quotient):
            keep = length if quotient > 0 else 0
        else:
            keep = clamp(math.floor(quotient), 0, length)

        self.value = self.value[:keep]
        return self

    def remove(self, substring: Any) -> "StringBuilder":
        """
        Удаление всех вхождений substring.

        Первое вхождение удаляется повторно, пока оно находится, поэтому
        вхождения, образованные после удаления, тоже удаляются:
        "aabb".remove("ab") → "".
        Диагностики: substring не str (INVALID_ARGUMENT), пустая (EMPTY_PATTERN).
        """
        if not isinstance(substring, str):
            return self._reject(
                "remove",
                DiagnosticCode.INVALID_ARGUMENT,
                f"substring must be a string, got {substring!r}",
                substring,
            )

        if not substring:
            return self._reject(
                "remove", DiagnosticCode.EMPTY_PATTERN, "substring must not be empty", substring
            )

        # Каждая итерация укорачивает строку, цикл конечен
        while substring in self.value:
            self.value = self.value.replace(substring, "", 1)

        return self

    def sub(self, start_position: Any, length: Any) -> "StringBuilder":
        """
        Вырезание length символов начиная с позиции start_position (нумерация с 1).

        Остаток строки сохраняется: StringBuilder("He").sub(1, 1) → "e".
        Окно за концом строки клампится.
        Диагностика: start_position < 1, length < 0 или нецелые аргументы.
        """
        if not is_integer_number(start_position) or not is_integer_number(length):
            return self._reject(
                "sub",
                DiagnosticCode.INVALID_ARGUMENT,
                f"start_position and length must be integers, "
                f"got {start_position!r}, {length!r}",
                start_position,
                length,
            )

        if start_position < 1 or length < 0:
            return self._reject(
                "sub",
                DiagnosticCode.INVALID_ARGUMENT,
                f"start_position must be >= 1 and length >= 0, "
                f"got {start_position!r}, {length!r}",
                start_position,
                length,
            )

        start = int(start_position) - 1
        self.value = self.value[:start] + self.value[start + int(length):]
        return self

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value
