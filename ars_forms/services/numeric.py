from __future__ import annotations
import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from functools import lru_cache
from typing import Optional, Tuple, Union

from ..models.culture import Culture
from ..models.field_config import NumericKind, NumericRange
from ..models.results import (
    DECIMAL_SENTINEL,
    Failure,
    IntParseResult,
    NumericParseResult,
)
from ..utils.log import get_logger
from ..utils.text import as_text
from .cultures import comma_decimal_culture, get_culture

log = get_logger(__name__)

INT32_MIN, INT32_MAX = -(2 ** 31), 2 ** 31 - 1

# estados intermediários de digitação: não são falha
_PENDING_DECIMAL = {"", ",", "."}

_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")

CultureLike = Union[Culture, str, None]

@lru_cache(maxsize=64)
def _number_re(c: Culture, exponent: bool) -> re.Pattern:
    g = r"\s" if c.group_separator.isspace() else re.escape(c.group_separator)
    d = re.escape(c.decimal_separator)
    exp = r"(?:[eE](?P<exp>[+-]?[0-9]+))?" if exponent else ""
    return re.compile(rf"(?P<int>[0-9](?:[0-9]|{g})*)?(?:{d}(?P<frac>[0-9]*))?{exp}")

def _to_float(m: Optional[re.Match], negative: bool) -> Optional[float]:
    if m is None:
        return None
    int_digits = re.sub(r"[^0-9]", "", m.group("int") or "")
    frac = m.group("frac") or ""
    if not int_digits and not frac:
        return None
    literal = f"{'-' if negative else ''}{int_digits or '0'}.{frac or '0'}"
    exp = m.groupdict().get("exp")
    if exp:
        literal += f"e{exp}"
    value = float(literal)
    return value if math.isfinite(value) else None

def _take_sign(s: str) -> Tuple[str, bool, bool]:
    """Retira um sinal inicial ou final. Retorna (resto, negativo, tinha_sinal)."""
    if s[:1] in ("+", "-"):
        return s[1:].strip(), s[0] == "-", True
    if s[-1:] in ("+", "-"):
        return s[:-1].strip(), s[-1] == "-", True
    return s, False, False

def _strip_symbol(s: str, symbol: str) -> str:
    if symbol and s.startswith(symbol):
        return s[len(symbol):].strip()
    if symbol and s.endswith(symbol):
        return s[:-len(symbol)].strip()
    return s

def _failed(cls=NumericParseResult):
    return cls(succeeded=False, error=Failure.PARSE_FAILURE)

# ---------------- Parsing ----------------

def parse_integer(text) -> IntParseResult:
    """
    Inteiro de 32 bits: espaços nas bordas e sinal opcional.
    Texto vazio é estado intermediário (pending).
    """
    raw = as_text(text)
    if raw == "":
        return IntParseResult(succeeded=False, pending=True)
    if not _INT_RE.fullmatch(raw):
        return _failed(IntParseResult)
    # int32 tem no máximo 10 dígitos significativos
    if len(raw.strip().lstrip("+-").lstrip("0")) > 10:
        log.debug("Inteiro fora de 32 bits: %d dígitos", len(raw.strip()))
        return _failed(IntParseResult)
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        log.debug("Inteiro fora de 32 bits: %s", raw.strip())
        return _failed(IntParseResult)
    return IntParseResult(succeeded=True, value=value)

def parse_decimal(text, culture: CultureLike = None) -> NumericParseResult:
    """
    Número decimal com separadores da cultura e expoente opcional.
    Se o texto contém vírgula, usa a cultura de vírgula decimal
    (ARS_COMMA_DECIMAL_CULTURE), passada explicitamente ao parser.
    "", "," e "." sozinhos são estados intermediários (pending).
    """
    raw = as_text(text)
    if raw in _PENDING_DECIMAL:
        return NumericParseResult(succeeded=False, pending=True)

    c = comma_decimal_culture() if "," in raw else get_culture(culture)
    s = raw.strip()
    negative = False
    if s[:1] in ("+", "-"):
        negative, s = s[0] == "-", s[1:]

    value = _to_float(_number_re(c, True).fullmatch(s), negative)
    if value is None:
        return _failed()
    return NumericParseResult(succeeded=True, value=value)

def parse_currency(text, culture: CultureLike = None) -> NumericParseResult:
    """
    Valor monetário na cultura: símbolo opcional (antes ou depois), sinal
    inicial ou final, parênteses para negativo, separadores de milhar.
    """
    raw = as_text(text)
    if raw in _PENDING_DECIMAL:
        return NumericParseResult(succeeded=False, pending=True)

    c = get_culture(culture)
    s = raw.strip()
    parens = len(s) > 1 and s.startswith("(") and s.endswith(")")
    if parens:
        s = s[1:-1].strip()

    s, negative, signed = _take_sign(s)
    s = _strip_symbol(s, c.currency_symbol)
    if not signed:
        s, negative, signed = _take_sign(s)
    if parens and signed:
        return _failed()

    value = _to_float(_number_re(c, False).fullmatch(s), negative or parens)
    if value is None:
        return _failed()
    return NumericParseResult(succeeded=True, value=value)

def parse_numeric(kind: NumericKind, text, culture: CultureLike = None) -> NumericParseResult:
    if kind == NumericKind.INTEGER:
        return parse_integer(text)
    if kind == NumericKind.CURRENCY:
        return parse_currency(text, culture)
    return parse_decimal(text, culture)

def check_range(value: float, numeric_range: NumericRange) -> Optional[Failure]:
    """OUT_OF_RANGE quando o valor sai da faixa; None caso contrário."""
    return None if numeric_range.contains(value) else Failure.OUT_OF_RANGE

# ---------------- Formatação ----------------

def _group(digits: str, sep: str) -> str:
    parts = []
    while len(digits) > 3:
        parts.insert(0, digits[-3:])
        digits = digits[:-3]
    parts.insert(0, digits)
    return sep.join(parts)

def format_currency(value, culture: CultureLike = None) -> str:
    """
    Símbolo + dígitos agrupados + casas decimais da cultura, arredondando
    metade para longe do zero. O sentinela de falha vira texto vazio.
    """
    if value is None or value == DECIMAL_SENTINEL:
        return ""
    c = get_culture(culture)
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Valor monetário inválido: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Valor monetário inválido: {value!r}")

    with localcontext() as ctx:
        ctx.prec = 400
        q = amount.quantize(Decimal(1).scaleb(-c.currency_decimals), rounding=ROUND_HALF_UP)
    integer, _, frac = f"{abs(q):f}".partition(".")
    number = _group(integer, c.group_separator)
    if c.currency_decimals:
        number += c.decimal_separator + frac
    pattern = c.currency_negative_pattern if q < 0 else c.currency_positive_pattern
    return pattern.format(symbol=c.currency_symbol, number=number)
