"""
Errors — иерархия исключений E-series

Все ошибки синхронные и не ретраятся: вызывающий код получает
исключение сразу, частичные результаты не возвращаются.
"""


class ESeriesError(Exception):
    """Базовое исключение библиотеки eseries."""

    pass


class ValidationError(ESeriesError, ValueError):
    """
    Некорректный ввод.

    Примеры: NaN/Inf или слишком малые границы диапазона,
    start > stop, num вне {1, 2, 3}.
    """

    pass


class NotFoundError(ESeriesError, LookupError):
    """
    Значение не найдено.

    Неизвестный E-series ключ или имя. Также исчерпание кандидатов
    в comparators — это нарушение инварианта окна поиска, а не
    штатный исход.
    """

    pass
