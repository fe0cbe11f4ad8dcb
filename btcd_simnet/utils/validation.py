# btcd_simnet/utils/validation.py
"""
Validação de inputs para btcd-simnet
"""

import re
from ipaddress import ip_address
from btcd_simnet.utils.logging import get_logger

logger = get_logger('validation')

LOCAL_HOSTNAMES = ('localhost',)


def validate_host(host):
    """
    Validar host RPC (endereço IP ou localhost)

    Args:
        host: String de IP ou hostname local

    Returns:
        bool: Host válido
    """
    if host in LOCAL_HOSTNAMES:
        return True
    try:
        ip_address(host)
        logger.debug(f"✅ Valid host: {host}")
        return True
    except ValueError as e:
        logger.error(f"❌ Invalid host: {host} - {str(e)}")
        return False


def validate_port(port):
    """
    Validar porta (1-65535)

    Args:
        port: Número da porta

    Returns:
        bool: Porta válida
    """
    try:
        port_num = int(port)
        valid = 1 <= port_num <= 65535

        if not valid:
            logger.error(f"❌ Port out of range: {port_num}")
        else:
            logger.debug(f"✅ Valid port: {port_num}")

        return valid

    except (ValueError, TypeError):
        logger.error(f"❌ Invalid port type: {port}")
        return False


def validate_node_name(name):
    """
    Validar nome de nó (mesmas regras de nome de container Docker)

    Args:
        name: Nome do nó

    Returns:
        bool: Nome válido
    """
    # lowercase, números, hífen, underscore, máx 63 chars
    pattern = r'^[a-z0-9_-]{1,63}$'

    valid = isinstance(name, str) and bool(re.match(pattern, name))

    if valid:
        logger.debug(f"✅ Valid node name: {name}")
    else:
        logger.error(f"❌ Invalid node name: {name}")

    return valid


def validate_peer_address(peer):
    """
    Validar endereço de peer (host ou host:porta)

    Args:
        peer: Endereço do peer

    Returns:
        bool: Endereço válido
    """
    if not isinstance(peer, str) or not peer:
        logger.error(f"❌ Invalid peer address: {peer!r}")
        return False

    host, sep, port = peer.rpartition(':')
    if not sep:
        host = peer
    elif not validate_port(port):
        return False

    # peers são resolvidos pela rede docker, então aceitamos hostnames
    valid = bool(re.match(r'^[A-Za-z0-9._-]{1,253}$', host))
    if not valid:
        logger.error(f"❌ Invalid peer host: {peer}")
    return valid


def validate_node_config(name, host, port, peers=()):
    """
    Validar configuração completa de nó bitcoin

    Args:
        name: Nome do nó
        host: Host do endpoint RPC
        port: Porta RPC
        peers: Endereços de peers

    Returns:
        tuple: (bool, list of errors)
    """

    errors = []

    if not validate_node_name(name):
        errors.append(f"Invalid node name: {name}")

    if not validate_host(host):
        errors.append(f"Invalid RPC host: {host}")

    if not validate_port(port):
        errors.append(f"Invalid RPC port: {port}")

    for peer in peers:
        if not validate_peer_address(peer):
            errors.append(f"Invalid peer address: {peer}")

    if errors:
        logger.error(f"❌ Config validation failed for {name}:")
        for error in errors:
            logger.error(f"   - {error}")
        return (False, errors)

    logger.debug(f"✅ Valid node config: {name} @ {host}:{port}")
    return (True, [])
