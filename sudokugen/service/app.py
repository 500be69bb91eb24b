import random
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from sudokugen.common.config import Config
from sudokugen.common.formatter import mask_grid
from sudokugen.common.grid import box_size_of
from sudokugen.engine.generator import PuzzleGenerator
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


def _render_puzzle(request: Request, size: Optional[int]) -> JSONResponse:
    config: Config = request.app.state.config
    size = config.generator.size if size is None else size
    try:
        box_size_of(size)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if size > config.service.max_size:
        raise HTTPException(
            status_code=400,
            detail=f"size {size} exceeds the maximum of {config.service.max_size}",
        )
    # the configured blank count is sized for the configured grid
    blank_count = min(config.display.blank_count, size * size)

    rng = random.Random(config.generator.seed)
    result = PuzzleGenerator(size=size, rng=rng).generate()
    rows = mask_grid(result.solution, blank_count, config.display.placeholder, rng)
    logger.info(f"Served {size}x{size} puzzle ({len(result.clues)} clues)")
    return JSONResponse(content={"puzzle": rows})


def create_app(config: Optional[Config] = None) -> FastAPI:
    app = FastAPI(title="sudokugen")
    app.state.config = (config or Config()).check_and_update()

    # Generation is CPU bound, so the handlers are sync and run in the threadpool
    @app.get("/")
    def root(request: Request):
        return _render_puzzle(request, None)

    @app.get("/puzzle")
    def puzzle(request: Request, size: Optional[int] = None):
        """Generate a puzzle, optionally of a given size."""
        return _render_puzzle(request, size)

    @app.get("/health")
    def health() -> Response:
        """Health check."""
        return Response(status_code=200)

    return app


async def serve_http(app: FastAPI, host: str, port: int) -> None:
    config = uvicorn.Config(app, host=host, port=port)
    server = uvicorn.Server(config)
    await server.serve()


async def run_app(config: Config) -> None:
    app = create_app(config)
    logger.info(
        f"Serving puzzles on http://{config.service.listen_address}:{config.service.port}"
    )
    await serve_http(app, config.service.listen_address, config.service.port)
