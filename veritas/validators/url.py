"""
Validação de URLs: formato (esquema e host) e, opcionalmente, se a URL responde 200 a um HEAD.
"""
import os
from typing import Any, Optional
from urllib.parse import urlparse

import httpx

from veritas.utils.outcome import VALID, ErrorKind, Invalid, ValidationOutcome
from veritas.utils.string_utils import clean_string, is_empty

URL_CHECK_TIMEOUT = float(os.getenv("URL_CHECK_TIMEOUT", "10"))


def validate_url(url: Any, check_reachability: bool = True, client: Optional[httpx.Client] = None) -> ValidationOutcome:
    """
    Valida uma URL.
    Parâmetros:
        url (Any): valor bruto
        check_reachability (bool): faz um HEAD na URL e exige status 200
        client (httpx.Client, opcional): cliente HTTP já configurado (útil em testes)
    Retorno:
        ValidationOutcome: Valid ou Invalid com a mensagem do erro
    """
    if not isinstance(url, str):
        return Invalid(ErrorKind.TYPE_MISMATCH, "URL must be a string")

    url = clean_string(url)
    if is_empty(url):
        return Invalid(ErrorKind.EMPTY, "URL cannot be empty")

    try:
        parsed = urlparse(url)
    except ValueError as exc:
        return Invalid(ErrorKind.INVALID_FORMAT, f"invalid URL format: {exc}")

    if not parsed.scheme:
        return Invalid(ErrorKind.INVALID_FORMAT, "URL must include a scheme (http:// or https://)")
    if not parsed.netloc:
        return Invalid(ErrorKind.INVALID_FORMAT, "URL must include a host")

    if not check_reachability:
        return VALID
    return _probe(url, client)


def _probe(url: str, client: Optional[httpx.Client]) -> ValidationOutcome:
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=URL_CHECK_TIMEOUT, follow_redirects=True)
    try:
        response = client.head(url)
    except httpx.HTTPError as exc:
        return Invalid(ErrorKind.UNREACHABLE, f"URL is not accessible: {exc}")
    finally:
        if owns_client:
            client.close()

    if response.status_code != httpx.codes.OK:
        return Invalid(ErrorKind.UNREACHABLE, f"URL returned status {response.status_code}, expected 200")
    return VALID
