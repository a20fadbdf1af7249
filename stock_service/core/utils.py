"""
Utility functions for the service.
"""
import re

from typing import Type, TypeVar, List, Any, Tuple
from pydantic import BaseModel

from stock_service.core.exceptions import StartupError

T = TypeVar('T', bound=BaseModel)

UINT32_MAX = 2**32 - 1

_BRACKETED_ADDR = re.compile(r"^\[(?P<host>[0-9A-Fa-f:.%\w]+)\]:(?P<port>\d+)$")
_PLAIN_ADDR = re.compile(r"^(?P<host>[^:\[\]]+):(?P<port>\d+)$")


async def model_to_schema(db_model: Any, schema_class: Type[T]) -> T:
    """
    Convert a SQLAlchemy model instance to a Pydantic schema instance.

    Args:
        db_model: SQLAlchemy model instance
        schema_class: Pydantic schema class

    Returns:
        Instance of the Pydantic schema
    """
    return schema_class.model_validate(db_model, from_attributes=True)

async def models_to_schemas(db_models: List[Any], schema_class: Type[T]) -> List[T]:
    """
    Convert a list of SQLAlchemy model instances to a list of Pydantic schema instances.
    """
    return [await model_to_schema(model, schema_class) for model in db_models]

def parse_bind_address(address: str) -> Tuple[str, int]:
    """
    Split a bind address into host and port.

    Accepts ``host:port`` and bracketed IPv6 ``[host]:port``.

    Raises:
        StartupError: If the address cannot be parsed or the port is out of range
    """
    address = (address or "").strip()
    match = _BRACKETED_ADDR.match(address) or _PLAIN_ADDR.match(address)
    if not match:
        raise StartupError(f"Invalid bind address '{address}'")

    port = int(match.group("port"))
    if not 0 < port < 65536:
        raise StartupError(f"Invalid port {port} in bind address '{address}'")

    return match.group("host"), port
