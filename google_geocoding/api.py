"""
Blocking convenience API.

Each call drives a short-lived Connection to completion on a fresh event
loop and keeps only the part of the reply most callers want.
"""

import asyncio
import logging
from typing import Any, Dict, List, Union

from .client import Connection
from .coordinates import Coordinates
from .models import Reply
from .query import DegeocodeQuery, GeocodeQuery

logger = logging.getLogger(__name__)


async def _geocodeReply(query: Union[str, GeocodeQuery], connectionKwargs: Dict[str, Any]) -> Reply:
    async with Connection(**connectionKwargs) as connection:
        return await connection.geocode(query)


async def _degeocodeReply(query: Union[Coordinates, DegeocodeQuery], connectionKwargs: Dict[str, Any]) -> Reply:
    async with Connection(**connectionKwargs) as connection:
        return await connection.degeocode(query)


def geocode(query: Union[str, GeocodeQuery], **connectionKwargs: Any) -> List[Coordinates]:
    """Get all the coordinates matching an address or query, dood!

    Blocks until the reply arrives. Must not be called from a running event
    loop; use ``Connection.geocode`` there.

    Args:
        query: Address or GeocodeQuery
        **connectionKwargs: Passed to Connection (apiKey, transport, ...)

    Returns:
        Location of every candidate in service order; empty on ZERO_RESULTS

    Example:
        >>> for coordinates in geocode("1600 Amphitheater Parkway, Mountain View, CA"):
        ...     print(coordinates)
    """
    reply = asyncio.run(_geocodeReply(query, connectionKwargs))
    logger.debug(f"geocode: {len(reply)} candidates")
    return reply.coordinates()


def degeocode(query: Union[Coordinates, DegeocodeQuery], **connectionKwargs: Any) -> List[str]:
    """Get all the formatted addresses at some coordinates.

    Blocking, like geocode().

    Returns:
        Formatted address of every candidate in service order
    """
    reply = asyncio.run(_degeocodeReply(query, connectionKwargs))
    logger.debug(f"degeocode: {len(reply)} candidates")
    return reply.addresses()
