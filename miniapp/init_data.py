"""
Verificação simplificada do ``initData`` enviado pelo Mini App.

Não há validação criptográfica: qualquer token com pelo menos
``MIN_TOKEN_LENGTH`` caracteres é aceito. O objeto ``user`` embutido no token
é usado apenas para descobrir o identificador do usuário.

Gramática do campo extraído::

    ... user=<JSON url-encoded> [& ...]

A chave é fixa (``user=``) e o valor termina no próximo ``&`` ou no fim do
token. Uma ocorrência no início do token ou logo após ``&`` tem prioridade;
sem ela vale a primeira ocorrência em qualquer posição (``abcdefghijuser=...``).
"""
import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 10
USER_KEY = 'user='
FIELD_SEPARATOR = '&'
UNKNOWN_USER = 'unknown'

REASON_MISSING = 'missing or too short'
REASON_PARSE = 'parse error'


class InitDataParseError(ValueError):
    """O valor de ``user`` não é um objeto JSON válido."""


@dataclass(frozen=True)
class Verdict:
    valid: bool
    identifier: Any = None
    failure_reason: str | None = None

    @classmethod
    def ok(cls, identifier: Any) -> 'Verdict':
        return cls(valid=True, identifier=identifier)

    @classmethod
    def fail(cls, reason: str) -> 'Verdict':
        return cls(valid=False, failure_reason=reason)


def _reject_constant(name: str):
    raise ValueError(f"constante JSON não suportada: {name}")


def _find_user_key(token: str) -> int:
    first = token.find(USER_KEY)
    pos = first
    while pos > 0 and token[pos - 1] != FIELD_SEPARATOR:
        pos = token.find(USER_KEY, pos + 1)
    return pos if pos >= 0 else first


def extract_user_field(token: str) -> str | None:
    """Retorna o valor bruto (ainda codificado) de ``user=`` ou None."""
    start = _find_user_key(token)
    if start < 0:
        return None
    start += len(USER_KEY)
    end = token.find(FIELD_SEPARATOR, start)
    if end < 0:
        end = len(token)
    return token[start:end]


def parse_user_field(raw: str) -> dict:
    try:
        decoded = unquote(raw, errors='strict')
        user = json.loads(decoded, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise InitDataParseError(f"user não é JSON válido: {raw[:80]!r}") from e
    if not isinstance(user, dict):
        raise InitDataParseError(f"user deve ser um objeto JSON, recebido {type(user).__name__}")
    return user


def validate_init_data(token: object) -> Verdict:
    if not isinstance(token, str) or len(token) < MIN_TOKEN_LENGTH:
        return Verdict.fail(REASON_MISSING)

    raw = extract_user_field(token)
    if raw is None:
        return Verdict.ok(UNKNOWN_USER)

    try:
        user = parse_user_field(raw)
    except InitDataParseError as e:
        logger.error(f"Erro ao interpretar initData: {e} ({e.__cause__!r})", exc_info=True)
        return Verdict.fail(REASON_PARSE)

    identifier = user.get('id')
    return Verdict.ok(UNKNOWN_USER if identifier is None else identifier)
