"""
Funções auxiliares de texto compartilhadas pelos validadores de email, telefone e URL.
"""
import re


def clean_string(s: str, to_lower: bool = False) -> str:
    """
    Remove espaços nas extremidades e, opcionalmente, converte para minúsculas.
    Parâmetros:
        s (str): texto original
        to_lower (bool): converte para minúsculas se True
    Retorno:
        str: texto limpo
    """
    cleaned = s.strip()
    if to_lower:
        cleaned = cleaned.lower()
    return cleaned


def is_empty(s: str) -> bool:
    return s.strip() == ""


def is_not_empty(s: str) -> bool:
    return not is_empty(s)


def match_regex(s: str, pattern: str) -> bool:
    """
    Verifica se o texto casa com o padrão informado (re.search).
    Levanta ValueError se o padrão for inválido.
    """
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise ValueError(f"invalid regex pattern: {exc}") from exc
    return regex.search(s) is not None
