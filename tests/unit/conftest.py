"""
Fixtures para testes unitários do btcd_simnet
"""

import pytest
from typing import Dict, Any
from unittest.mock import AsyncMock, Mock

from btcd_simnet.client import AsyncBtcdRpcClient
from btcd_simnet.config import FundingConfig
from btcd_simnet.models import BitcoinNode, LightningNode, Simulation


@pytest.fixture
def btcd_node():
    """Nó btcd de teste"""
    return BitcoinNode(
        name="backend1",
        network_id=1,
        host="127.0.0.1",
        rpc_port=18334,
        user="polaruser",
        password="polarpass",
        peers=["polar-n1-backend2", "polar-n1-backend3:18444"],
    )


@pytest.fixture
def lightning_nodes():
    return [
        LightningNode(name="alice", network_id=1),
        LightningNode(name="bob", network_id=1),
        LightningNode(name="carol", network_id=1),
    ]


@pytest.fixture
def simulation(lightning_nodes):
    """Simulação alice → bob"""
    alice, bob, _ = lightning_nodes
    return Simulation(
        network_id=1,
        source=alice,
        destination=bob,
        interval_secs=10,
        amount_msat=1000,
    )


@pytest.fixture
def funding_config():
    """Config sem espera de maturidade"""
    return FundingConfig(maturity_grace_seconds=0)


@pytest.fixture
def mock_rpc_response():
    """Factory para criar resposta RPC mockada"""
    def _mock_response(result: Any) -> Dict[str, Any]:
        return {
            "result": result,
            "error": None,
            "id": 1
        }
    return _mock_response


@pytest.fixture
def mock_rpc_error():
    """Factory para criar erro RPC mockado"""
    def _mock_error(code: int, message: str) -> Dict[str, Any]:
        return {
            "result": None,
            "error": {
                "code": code,
                "message": message,
            },
            "id": 1
        }
    return _mock_error


@pytest.fixture
def blockchain_info_result():
    """getblockchaininfo já normalizado"""
    def _result(blocks: int = 0) -> Dict[str, Any]:
        return {
            "chain": "regtest",
            "blocks": blocks,
            "headers": blocks,
            "bestblockhash": "0f9188f13cb7b2c71f2a335e3a4fc328bf5beb436012afca590b1a11466e2206",
            "difficulty": 1,
            "mediantime": 1296688602,
            "pruned": False,
        }
    return _result


@pytest.fixture
def wallet_info_result():
    """getwalletinfo já normalizado"""
    def _result(balance: float = 0) -> Dict[str, Any]:
        return {
            "walletversion": 1,
            "balance": balance,
            "keypoololdest": 0,
            "keypoolsize": 100,
            "paytxfee": 0,
        }
    return _result


@pytest.fixture
def fake_rpc():
    """
    Factory de cliente RPC falso

    `responses` mapeia método → resultado, exceção ou callable(params).
    As chamadas ficam em `client.calls` como (método, params).
    """
    def _fake(responses: Dict[str, Any]):
        client = Mock(spec=AsyncBtcdRpcClient)
        client.calls = []

        async def _call(node, method, params=None):
            client.calls.append((method, list(params or [])))
            response = responses[method]
            if isinstance(response, BaseException):
                raise response
            if callable(response):
                return response(params)
            return response

        client.call = AsyncMock(side_effect=_call)
        return client
    return _fake
