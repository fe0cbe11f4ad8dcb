# btcd_simnet/client/exceptions.py

"""
Exceções customizadas para cliente btcd
"""

from typing import Optional


class BtcdClientError(Exception):
    """Erro base para cliente btcd"""

    pass


class BtcdRpcError(BtcdClientError):
    """Nó respondeu, mas o envelope JSON-RPC trouxe um erro"""

    def __init__(self, message: str, code: Optional[int] = None):
        self.code = code
        self.message = message
        if code is None:
            super().__init__(message)
        else:
            super().__init__(f"RPC Error {code}: {message}")


class BtcdTransportError(BtcdClientError):
    """Requisição não completou (conexão recusada, timeout, JSON inválido)"""

    pass


class BtcdTimeoutError(BtcdClientError, TimeoutError):
    """Nó não ficou pronto dentro do prazo de polling"""

    def __init__(self, message: str, last_error: Optional[BaseException] = None):
        self.last_error = last_error
        super().__init__(message)
