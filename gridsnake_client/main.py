"""Entry point for the pygame based client."""

from __future__ import annotations

import argparse
import asyncio
import pygame

from .entities import BoardState
from .input import InputManager
from .network import NetworkClient
from .render import Renderer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the gridsnake client")
    parser.add_argument("--host", default="127.0.0.1", help="Server host")
    parser.add_argument("--port", type=int, default=8765, help="Server port")
    parser.add_argument("--cell-size", type=int, default=20, help="Cell size in pixels")
    return parser.parse_args()


async def run_client(args: argparse.Namespace) -> None:
    uri = f"ws://{args.host}:{args.port}"
    network = NetworkClient(uri)
    welcome = await network.connect()
    board = BoardState(width=int(welcome["width"]), height=int(welcome["height"]))

    pygame.init()
    screen = pygame.display.set_mode((board.width * args.cell_size, board.height * args.cell_size))
    pygame.display.set_caption("gridsnake")
    renderer = Renderer(screen, args.cell_size)
    clock = pygame.time.Clock()
    input_manager = InputManager()

    message_task = asyncio.create_task(network.next_message())
    running = True

    while running:
        clock.tick(60)
        for event in pygame.event.get():
            if input_manager.wants_quit(event):
                running = False
            elif input_manager.wants_rejoin(event) and board.game_over:
                board.game_over = False
                await network.send_join()
            else:
                key = input_manager.key_for(event)
                if key is not None:
                    await network.send_key(key)

        if message_task.done():
            message = message_task.result()
            kind = message.get("type")
            if kind == "frame":
                board.update_from_frame(message)
            elif kind == "gameover" and message.get("id") == welcome.get("id"):
                board.game_over = True
            elif kind == "disconnect":
                running = False
            message_task = asyncio.create_task(network.next_message())

        renderer.clear()
        renderer.draw_header(board)
        renderer.draw_cells(board.cells)
        renderer.draw_leaderboard(board.leaderboard)
        renderer.present()
        await asyncio.sleep(0)

    message_task.cancel()
    await network.close()
    pygame.quit()


def main() -> None:
    args = parse_args()
    asyncio.run(run_client(args))


if __name__ == "__main__":
    main()
