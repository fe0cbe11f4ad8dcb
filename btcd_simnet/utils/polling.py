# btcd_simnet/utils/polling.py
"""
Polling assíncrono de prontidão

Repete uma sonda até ela responder sem erro ou o prazo estourar.
"""

import asyncio
import math
from typing import Any, Awaitable, Callable, Optional

from btcd_simnet.client.exceptions import BtcdTimeoutError
from btcd_simnet.utils.logging import get_logger

logger = get_logger('polling')


async def wait_for(
    condition: Callable[[], Awaitable[Any]],
    interval: float,
    timeout: float,
    description: str = "condition",
) -> Any:
    """
    Executa `condition` até o primeiro sucesso

    Faz no máximo ceil(timeout / interval) tentativas e nunca passa do
    deadline. Uma requisição em andamento não é cancelada.

    Args:
        condition: Corrotina sem argumentos usada como sonda
        interval: Segundos entre tentativas
        timeout: Orçamento total em segundos
        description: Texto usado nos logs

    Returns:
        Valor retornado pela primeira sonda bem-sucedida

    Raises:
        BtcdTimeoutError: Nenhuma tentativa teve sucesso no prazo
    """
    if interval <= 0 or timeout <= 0:
        raise ValueError(f"interval and timeout must be positive (got {interval}, {timeout})")

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    max_attempts = max(1, math.ceil(timeout / interval))
    last_error: Optional[BaseException] = None

    attempt = 0
    while True:
        attempt += 1
        try:
            result = await condition()
            logger.debug(f"✅ {description} succeeded on attempt {attempt}")
            return result
        except Exception as e:
            last_error = e
            logger.debug(f"{description} not ready (attempt {attempt}/{max_attempts}): {e}")

        if attempt >= max_attempts or loop.time() + interval > deadline:
            break
        await asyncio.sleep(interval)

    raise BtcdTimeoutError(
        f"Timed out waiting for {description} after {timeout}s ({attempt} attempts)",
        last_error=last_error,
    )
