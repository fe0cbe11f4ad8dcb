# tests/conftest.py

"""
Configuração global de testes do projeto btcd_simnet
"""

import pytest


def pytest_configure(config):
    """Configuração executada antes dos testes"""
    config.addinivalue_line(
        "markers", "integration: mark test requiring a running btcd node"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )


def pytest_addoption(parser):
    """Adiciona opções customizadas ao pytest"""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests (requires running btcd node)"
    )


def pytest_collection_modifyitems(config, items):
    """Pula testes de integração sem --run-integration"""
    if config.getoption("--run-integration"):
        return
    skip = pytest.mark.skip(reason="needs --run-integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
