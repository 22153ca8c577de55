# pos/main.py
import logging
from pathlib import Path
from typing import List, Optional, Union

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import config
from .core import create_order_logic, list_products_logic
from .database import AppState
from .models import Order, Product

logger = logging.getLogger(__name__)


def get_state(request: Request) -> AppState:
    return request.app.state.pos


def create_app(
    state: Optional[AppState] = None,
    static_dir: Optional[Union[str, Path]] = None,
) -> FastAPI:
    """
    Build the POS application around ``state``.

    A fresh AppState (seeded catalog, no orders) is created when none is
    given. ``static_dir`` defaults to config.STATIC_DIR; if it does not exist
    the file server is left out and unknown paths answer 404.
    """
    app = FastAPI(title="fastfood-pos (in-memory)")
    app.state.pos = state if state is not None else AppState()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=config.CORS_ALLOW_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    # ---------------------------
    # Error handlers
    # ---------------------------
    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        # the rejected input is left out: it may hold NaN, which JSONResponse cannot render
        errors = [{k: v for k, v in err.items() if k != "input"} for err in exc.errors()]
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(errors)})

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "internal server error"})

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/api/products", response_model=List[Product])
    def list_products(request: Request):
        return list_products_logic(get_state(request))

    # ---------------------------
    # Order endpoints
    # ---------------------------
    @app.post("/api/orders", status_code=201, response_model=Order)
    def create_order(order: Order, request: Request):
        return create_order_logic(get_state(request), order)

    # ---------------------------
    # Static assets (must come last, it claims "/")
    # ---------------------------
    static_path = Path(static_dir) if static_dir is not None else config.STATIC_DIR
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=str(static_path), html=True), name="static")
    else:
        logger.warning("Static directory %s not found; serving the API only", static_path)

    return app


app = create_app()


def run(host: str = config.HOST, port: int = config.PORT):
    import uvicorn

    from .logging_config import setup_logging

    setup_logging()
    logger.info("Server listening on http://localhost:%d", port)
    # uvicorn logs the error and exits non-zero if the port cannot be bound
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
