"""
CLI: поиск по E-series из командной строки.

Пример запуска:
    eseries nearest E24 4200 --symbol
    eseries range E12 1000 10000
    python -m eseries tolerance E96 --symbol

Ошибки (неизвестная серия, нечисловой аргумент, невалидный диапазон)
выводятся в stderr, код возврата 1.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Callable, Sequence

from jsonschema import ValidationError as SchemaValidationError

from eseries import __version__
from eseries.core.contracts import QueryResultValidator
from eseries.core.domain.catalog import resolve, tolerance, values
from eseries.core.domain.results import QueryKind, QueryResult
from eseries.core.domain.series import ESeries
from eseries.core.errors import ESeriesError
from eseries.core.math.numerical_safeguards import is_valid_float
from eseries.eng import eng_string
from eseries.lookup.comparators import (
    find_greater_than,
    find_greater_than_or_equal,
    find_less_than,
    find_less_than_or_equal,
)
from eseries.lookup.erange import erange
from eseries.lookup.nearest import find_nearest, find_nearest_few
from eseries.lookup.tolerance import (
    lower_tolerance_limit,
    tolerance_limits,
    upper_tolerance_limit,
)

log = logging.getLogger("eseries.cli")

# Значащие цифры при выводе значений
PRESENTATION_SIG_FIGS = 3


class ArgumentError(ESeriesError):
    """Аргумент командной строки не удалось интерпретировать."""


def extract_value(text: str) -> float:
    """Число из аргумента командной строки."""
    try:
        value = float(text)
    except ValueError:
        raise ArgumentError(f"{text!r} could not be interpreted as a number") from None

    if not is_valid_float(value):
        raise ArgumentError(f"{text!r} is not a finite number")
    return value


def present_value(value: float, use_symbol: bool) -> str:
    return eng_string(value, PRESENTATION_SIG_FIGS, use_symbol)


# --------------------------------------------------------------------------
# команды: (series_key, числовые аргументы) -> значения
# --------------------------------------------------------------------------

_VALUE_QUERIES: dict[QueryKind, Callable[[ESeries, float], float | Sequence[float]]] = {
    QueryKind.NEAREST: find_nearest,
    QueryKind.NEARBY: find_nearest_few,
    QueryKind.GT: find_greater_than,
    QueryKind.GE: find_greater_than_or_equal,
    QueryKind.LT: find_less_than,
    QueryKind.LE: find_less_than_or_equal,
    QueryKind.LOWER_TOLERANCE_LIMIT: lower_tolerance_limit,
    QueryKind.UPPER_TOLERANCE_LIMIT: upper_tolerance_limit,
    QueryKind.TOLERANCE_LIMITS: tolerance_limits,
}

_DESCRIPTIONS: dict[QueryKind, str] = {
    QueryKind.NEAREST: "The nearest value in an E-series",
    QueryKind.NEARBY: "Three nearby values in an E-series",
    QueryKind.GT: "The smallest value greater than the given value",
    QueryKind.GE: "The smallest value greater than or equal to the given value",
    QueryKind.LT: "The largest value less than the given value",
    QueryKind.LE: "The largest value less than or equal to the given value",
    QueryKind.LOWER_TOLERANCE_LIMIT: "The lower tolerance limit of a nominal value",
    QueryKind.UPPER_TOLERANCE_LIMIT: "The upper tolerance limit of a nominal value",
    QueryKind.TOLERANCE_LIMITS: "The lower and upper tolerance limits of a nominal value",
    QueryKind.TOLERANCE: "The tolerance of the given E-series",
    QueryKind.SERIES: "The base values for the given E-series",
    QueryKind.RANGE: "All values in the given E-series from start to stop inclusive",
}


def run_query(kind: QueryKind, series_key: ESeries, arguments: Sequence[float]) -> QueryResult:
    """Выполнение запроса и упаковка результата в QueryResult."""
    if kind is QueryKind.TOLERANCE:
        result: Sequence[float] = [tolerance(series_key)]
    elif kind is QueryKind.SERIES:
        result = values(series_key)
    elif kind is QueryKind.RANGE:
        result = erange(series_key, *arguments)
    else:
        found = _VALUE_QUERIES[kind](series_key, *arguments)
        result = list(found) if isinstance(found, (list, tuple)) else [found]

    return QueryResult(
        query=kind,
        series=series_key.name,
        arguments=tuple(arguments),
        values=tuple(result),
    )


def render(result: QueryResult, use_symbol: bool) -> list[str]:
    """Текстовые строки вывода для результата."""
    if result.query is QueryKind.TOLERANCE:
        (tol,) = result.values
        return [f"{tol * 100:g}%" if use_symbol else f"{tol:g}"]

    if result.query is QueryKind.SERIES:
        return [eng_string(item, 3, prefix=False) for item in result.values]

    return [present_value(item, use_symbol) for item in result.values]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="eseries", description="E-series preferred values utility")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Отладочный вывод в stderr")
    sub = p.add_subparsers(dest="command", metavar="command", required=True)

    for kind, description in _DESCRIPTIONS.items():
        cmd = sub.add_parser(kind.value, help=description, description=description)
        cmd.add_argument("series", metavar="e-series", help="E-series name (E12, E24, etc.)")

        if kind is QueryKind.RANGE:
            cmd.add_argument("start", metavar="start-value", help="The start value")
            cmd.add_argument("stop", metavar="stop-value", help="The stop value")
        elif kind in _VALUE_QUERIES:
            cmd.add_argument("value", help="The target value")

        if kind is QueryKind.TOLERANCE:
            symbol_help = "Display as a percentage"
        else:
            symbol_help = "Use the SI magnitude prefix symbol"
        cmd.add_argument("-s", "--symbol", action="store_true", help=symbol_help)
        cmd.add_argument("--json", action="store_true", help="Вывод в формате JSON")

    return p


def _numeric_arguments(args: argparse.Namespace) -> list[float]:
    names = [name for name in ("start", "stop", "value") if hasattr(args, name)]
    return [extract_value(getattr(args, name)) for name in names]


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        kind = QueryKind(args.command)
        series_key = resolve(args.series)
        result = run_query(kind, series_key, _numeric_arguments(args))
    except ESeriesError as exc:
        log.debug("query failed", exc_info=True)
        print(exc, file=sys.stderr)
        return 1

    if args.json:
        payload = result.model_dump_json()
        try:
            QueryResultValidator().validate(json.loads(payload))
        except SchemaValidationError as exc:
            # NaN/Inf сериализуются pydantic как null
            log.debug("query result rejected by contract", exc_info=True)
            print(f"Query result is not representable as JSON: {exc.message}", file=sys.stderr)
            return 1
        print(payload)
    else:
        for line in render(result, args.symbol):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
