"""A websocket relay: pairs websocket clients, or bridges a client to a TCP server."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import ipaddress
import logging
import os
from collections.abc import Coroutine, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl

import websockets

logger = logging.getLogger(__name__)

_READ_SIZE = 16 * 1024
_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = 8080


@dataclass(frozen=True)
class WsPeer:
    """Relay between two websocket clients that share ``id``."""

    id: str


@dataclass(frozen=True)
class TcpTarget:
    """Relay between a websocket client and the TCP server at ``addr``."""

    addr: str


class RelayError(Exception):
    """A relay request was invalid or a relayed client misbehaved."""


def parse_target(path: str) -> WsPeer | TcpTarget:
    """Work out what a request path asks for.

    ``/ws?id=...`` pairs clients, ``/tcp?addr=host:port`` bridges to TCP.
    Raises RelayError for anything else.
    """
    route, sep, query = path.partition("?")
    if not sep:
        raise RelayError("query string not provided")
    params = dict(parse_qsl(query, keep_blank_values=True))
    if route == "/tcp":
        addr = params.get("addr")
        if addr is None:
            raise RelayError("addr query parameter not provided")
        return TcpTarget(addr)
    if route == "/ws":
        id = params.get("id")
        if id is None:
            raise RelayError("id query parameter not provided")
        return WsPeer(id)
    raise RelayError(f"invalid path: {route!r}")


def _split_addr(addr: str) -> tuple[str, int]:
    host, sep, port_text = addr.rpartition(":")
    host = host.strip("[]")
    if not sep or not host:
        raise RelayError(f"invalid address: {addr!r}")
    try:
        port = int(port_text)
    except ValueError:
        raise RelayError(f"invalid address: {addr!r}") from None
    if not 0 <= port <= 65535:
        raise RelayError(f"invalid address: {addr!r}")
    return host, port


def _request_path(websocket: Any) -> str:
    request = getattr(websocket, "request", None)
    path = getattr(request, "path", None)
    if path is not None:
        return path
    return websocket.path


async def _try_join(*coros: Coroutine[Any, Any, Any]) -> None:
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def _forward(source: Any, sink: Any) -> None:
    async for message in source:
        await sink.send(message)
    await sink.close()


class Relay:
    """Handles relay connections; clients waiting for a peer are held here."""

    def __init__(self) -> None:
        self._waiting: dict[str, tuple[Any, asyncio.Future[None]]] = {}

    async def handle(self, websocket: Any) -> None:
        """Serve one accepted websocket connection until the relay ends.

        Raises RelayError if the request is invalid, after closing the websocket.
        """
        try:
            target = parse_target(_request_path(websocket))
        except RelayError:
            await websocket.close()
            raise
        if isinstance(target, TcpTarget):
            await self._relay_tcp(target.addr, websocket)
        else:
            await self._relay_ws(target.id, websocket)

    async def _relay_ws(self, id: str, websocket: Any) -> None:
        waiting = self._waiting.pop(id, None)
        if waiting is None:
            done: asyncio.Future[None] = asyncio.get_running_loop().create_future()
            self._waiting[id] = (websocket, done)
            logger.debug("connection %r waiting", id)
            try:
                await done
            finally:
                entry = self._waiting.get(id)
                if entry is not None and entry[0] is websocket:
                    del self._waiting[id]
            return

        peer, done = waiting
        logger.debug("connection %r started", id)
        try:
            await _try_join(_forward(websocket, peer), _forward(peer, websocket))
        finally:
            if not done.done():
                done.set_result(None)
        logger.debug("connection %r closed cleanly", id)

    async def _relay_tcp(self, addr: str, websocket: Any) -> None:
        host, port = _split_addr(addr)
        reader, writer = await asyncio.open_connection(host, port)
        client_closed = False

        async def ws_to_tcp() -> None:
            nonlocal client_closed
            async for message in websocket:
                if not isinstance(message, (bytes, bytearray, memoryview)):
                    raise RelayError("websocket client sent non-binary message")
                writer.write(message)
                await writer.drain()
            logger.debug("websocket client closed")
            client_closed = True
            if writer.can_write_eof():
                writer.write_eof()

        async def tcp_to_ws() -> None:
            while True:
                data = await reader.read(_READ_SIZE)
                if not data:
                    logger.debug("tcp server closed")
                    await websocket.close()
                    return
                if not client_closed:
                    await websocket.send(data)

        try:
            await _try_join(ws_to_tcp(), tcp_to_ws())
        finally:
            writer.close()
            with contextlib.suppress(OSError):
                await writer.wait_closed()


async def serve(host: str = _DEFAULT_HOST, port: int = _DEFAULT_PORT, relay: Relay | None = None) -> None:
    """Run the relay server on ``host``:``port`` until cancelled."""
    relay = relay if relay is not None else Relay()

    async def handler(websocket: Any) -> None:
        peer = getattr(websocket, "remote_address", None)
        logger.info("accepted connection from: %s", peer)
        try:
            await relay.handle(websocket)
        except Exception as exc:
            logger.warning("connection from %s failed: %s", peer, exc)

    async with websockets.serve(handler, host, port) as server:
        for sock in getattr(server, "sockets", None) or ():
            logger.info("listening on: %s", sock.getsockname())
        await asyncio.get_running_loop().create_future()


def _listen_address(environ: Mapping[str, str]) -> tuple[str, int]:
    port_text = environ.get("PROXY_PORT")
    port = _DEFAULT_PORT
    if port_text is not None:
        try:
            port = int(port_text)
        except ValueError:
            raise SystemExit("port should be valid integer") from None
        if not 0 <= port <= 65535:
            raise SystemExit("port should be valid integer")
    host_text = environ.get("PROXY_IP")
    host = _DEFAULT_HOST
    if host_text is not None:
        try:
            host = str(ipaddress.ip_address(host_text))
        except ValueError:
            raise SystemExit("should be valid IP address") from None
    return host, port


def main(argv: list[str] | None = None) -> int:
    """Start the relay on PROXY_IP:PROXY_PORT (default 127.0.0.1:8080)."""
    parser = argparse.ArgumentParser(
        prog="mpcutils-relay",
        description="Relay websocket clients to each other or to TCP servers. "
        "Listens on PROXY_IP and PROXY_PORT.",
    )
    parser.parse_args(argv)
    host, port = _listen_address(os.environ)
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(serve(host, port))
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        raise SystemExit(f"failed to bind to address: {exc}") from exc
    return 0