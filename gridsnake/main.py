"""Entry point for the asyncio based game server."""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
from typing import Dict, List, Optional
import uuid

import websockets
from websockets.asyncio.server import ServerConnection, serve

from . import constants, protocol
from .loop import GameLoop
from .render import FrameRenderer
from .snake import Snake
from .world import World


class GameServer:
    """Bridge websocket sessions to the world and broadcast every frame."""

    def __init__(
        self,
        host: str,
        port: int,
        width: int = constants.BOARD_WIDTH,
        height: int = constants.BOARD_HEIGHT,
        interval: float = constants.TICK_INTERVAL,
        snake_collisions: bool = constants.SNAKE_COLLISIONS,
    ) -> None:
        self.host = host
        self.port = port
        self.renderer = FrameRenderer(width, height)
        self.world = World(self.renderer, snake_collisions, on_collision=self._snake_died)
        self.loop = GameLoop(self.world, interval, after_tick=self._broadcast_frame, on_quit=self._request_stop)
        self.clients: Dict[str, ServerConnection] = {}
        self._game_over: List[Snake] = []
        self._broadcast_lock = asyncio.Lock()
        self._stop: Optional[asyncio.Event] = None

    async def start(self) -> None:
        """Serve websocket clients until :meth:`GameLoop.quit` is triggered."""

        self._stop = asyncio.Event()
        event_loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                event_loop.add_signal_handler(sig, self.loop.quit)
            except NotImplementedError:  # pragma: no cover - windows
                pass
        async with serve(self._handle_client, self.host, self.port):
            logging.info("Server listening on %s:%s", self.host, self.port)
            await self._stop.wait()
        logging.info("Server shut down")

    def _request_stop(self) -> None:
        if self._stop is not None:
            self._stop.set()

    def _snake_died(self, snake: Snake) -> None:
        self._game_over.append(snake)

    async def _broadcast_frame(self) -> None:
        frame = self.renderer.last_frame
        game_over, self._game_over = self._game_over, []
        if frame is None or not self.clients:
            return
        payload = protocol.encode_frame(frame, self.world.leaderboard())
        async with self._broadcast_lock:
            disconnected = []
            for client_id, ws in list(self.clients.items()):
                try:
                    for snake in game_over:
                        if snake.owner == client_id:
                            await ws.send(protocol.encode_game_over(snake))
                    await ws.send(payload)
                except Exception:  # pragma: no cover - we simply drop failed clients
                    logging.exception("Failed to send frame to client %s", client_id)
                    disconnected.append(client_id)
            for client_id in disconnected:
                ws = self.clients.pop(client_id, None)
                self.world.leave(client_id)
                if ws is not None:
                    await ws.close()

    async def _handle_client(self, websocket: ServerConnection) -> None:
        client_id = uuid.uuid4().hex
        if not self.loop.running:
            self.loop.start()
        snake = self.world.join(client_id)
        self.clients[client_id] = websocket
        await websocket.send(protocol.encode_welcome(snake, self.renderer.container))
        logging.info("Client %s connected", client_id)
        try:
            async for message in websocket:
                try:
                    payload = protocol.parse_client_message(message)
                except ValueError:
                    continue
                kind = payload.get("type")
                if kind == "key":
                    self.world.change_direction(client_id, payload.get("key"))
                elif kind == "join" and client_id not in self.world.snakes:
                    self.world.join(client_id)
        except websockets.ConnectionClosed:
            logging.info("Client %s disconnected", client_id)
        finally:
            self.clients.pop(client_id, None)
            self.world.leave(client_id)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the gridsnake server")
    parser.add_argument("--host", default="0.0.0.0", help="Host interface to bind to")
    parser.add_argument("--port", type=int, default=8765, help="Port to listen on")
    parser.add_argument("--width", type=int, default=constants.BOARD_WIDTH, help="Board width in cells")
    parser.add_argument("--height", type=int, default=constants.BOARD_HEIGHT, help="Board height in cells, header row included")
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=int(constants.TICK_INTERVAL * 1000),
        help="Milliseconds between two ticks",
    )
    parser.add_argument(
        "--no-collisions",
        dest="snake_collisions",
        action="store_false",
        help="Let snakes pass through each other",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    server = GameServer(
        args.host,
        args.port,
        width=args.width,
        height=args.height,
        interval=args.tick_ms / 1000,
        snake_collisions=args.snake_collisions,
    )
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
