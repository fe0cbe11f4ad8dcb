# btcd_simnet/client/rpc_client.py

"""
Cliente JSON-RPC assíncrono para btcd/btcwallet

Usa aiohttp; o envelope segue o dialeto JSON-RPC 1.0 do btcd.
"""

import asyncio
import json
from typing import Any, Dict, List, Optional

import aiohttp

from btcd_simnet.models.node import BitcoinNode
from btcd_simnet.utils.keys import snake_keys_to_camel
from btcd_simnet.utils.logging import get_logger
from btcd_simnet.client.exceptions import (
    BtcdRpcError,
    BtcdTransportError,
)

logger = get_logger("client.rpc")

JSONRPC_VERSION = "1.0"

# métodos cujos params carregam segredos
SENSITIVE_METHODS = frozenset({"walletpassphrase", "walletpassphrasechange"})


class AsyncBtcdRpcClient:
    """
    Cliente assíncrono JSON-RPC para nós btcd

    Exemplos de uso:
        >>> async with AsyncBtcdRpcClient() as client:
        ...     info = await client.call(node, "getblockchaininfo")
    """

    def __init__(self, timeout: int = 30, headers: Optional[Dict[str, str]] = None):
        """
        Inicializa cliente RPC

        Args:
            timeout: Timeout total de cada requisição em segundos
            headers: Headers HTTP customizados
        """
        self.timeout_seconds = timeout
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = headers or {"Content-Type": "application/json"}
        self._request_id = 0
        self._session: Optional[aiohttp.ClientSession] = None

    def _next_id(self) -> int:
        """Gera próximo request ID"""
        self._request_id += 1
        return self._request_id

    async def __aenter__(self):
        """Context manager entry"""
        self._session = aiohttp.ClientSession(headers=self.headers, timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        await self.close()

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None

    async def call(self, node: BitcoinNode, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Executa chamada JSON-RPC

        Args:
            node: Nó de destino (endpoint e credenciais)
            method: Nome do método RPC
            params: Lista de parâmetros

        Returns:
            Resultado da chamada com chaves normalizadas para camelCase

        Raises:
            BtcdRpcError: Erro retornado pelo nó
            BtcdTransportError: Nó inalcançável ou resposta inválida
        """
        request_id = self._next_id()
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "id": request_id,
            "method": method,
            "params": list(params or []),
        }

        logger.debug(
            f"btcd API: [request] {node.name} {request_id} \"{node.rpc_url}\" "
            f"{json.dumps(self._loggable(payload))}"
        )

        auth = aiohttp.BasicAuth(node.user, node.password)
        try:
            data = await self._post(node.rpc_url, payload, auth)
        except asyncio.TimeoutError:
            raise BtcdTransportError(
                f"Request timeout after {self.timeout_seconds}s ({node.name} {method})"
            )
        except aiohttp.ClientError as e:
            raise BtcdTransportError(f"Request failed ({node.name} {method}): {e}")
        except ValueError as e:
            raise BtcdTransportError(f"Malformed JSON response ({node.name} {method}): {e}")

        logger.debug(f"btcd API: [response] {node.name} {request_id} {json.dumps(data, indent=2)}")

        if not isinstance(data, dict):
            raise BtcdTransportError(f"Unexpected response envelope from {node.name}: {data!r}")

        error = data.get("error")
        if error:
            if isinstance(error, dict):
                raise BtcdRpcError(
                    message=error.get("message", "Unknown error"),
                    code=error.get("code"),
                )
            raise BtcdRpcError(message=str(error))

        return snake_keys_to_camel(data.get("result"))

    async def _post(self, url: str, payload: Dict[str, Any], auth: aiohttp.BasicAuth) -> Any:
        """POST bruto; decodifica o corpo como JSON"""
        if self._session is not None:
            return await self._send(self._session, url, payload, auth)

        async with aiohttp.ClientSession(headers=self.headers, timeout=self.timeout) as session:
            return await self._send(session, url, payload, auth)

    @staticmethod
    async def _send(session: aiohttp.ClientSession, url: str, payload: Dict[str, Any], auth) -> Any:
        async with session.post(url, json=payload, auth=auth) as response:
            body = await response.text()
            # btcd devolve 500 com envelope de erro válido; só falha se não for JSON
            try:
                return json.loads(body)
            except ValueError:
                response.raise_for_status()
                raise

    @staticmethod
    def _loggable(payload: Dict[str, Any]) -> Dict[str, Any]:
        if payload["method"] in SENSITIVE_METHODS:
            return {**payload, "params": ["***"] * len(payload["params"])}
        return payload
