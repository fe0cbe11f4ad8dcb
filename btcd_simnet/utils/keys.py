# btcd_simnet/utils/keys.py
"""
Normalização de chaves das respostas RPC

O btcd responde com chaves em snake_case; o modelo interno usa camelCase.
A conversão é feita só na entrada (externo → interno).
"""

from typing import Any


def snake_to_camel(key: str) -> str:
    """
    Converte uma chave snake_case para camelCase

    Chaves já em camelCase (ou sem underscore) voltam inalteradas.
    Underscores nas pontas são preservados (ex: "_private").
    """
    stripped = key.strip('_')
    if '_' not in stripped:
        return key

    leading = key[:len(key) - len(key.lstrip('_'))]
    trailing = key[len(key.rstrip('_')):]

    first, *rest = [part for part in stripped.split('_') if part]
    camel = first + ''.join(part[:1].upper() + part[1:] for part in rest)
    return f"{leading}{camel}{trailing}"


def snake_keys_to_camel(value: Any) -> Any:
    """
    Converte recursivamente as chaves de dicts (inclusive dentro de listas)

    Args:
        value: Resultado decodificado do JSON

    Returns:
        Mesma estrutura com chaves em camelCase
    """
    if isinstance(value, dict):
        return {
            snake_to_camel(k) if isinstance(k, str) else k: snake_keys_to_camel(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [snake_keys_to_camel(item) for item in value]
    return value
