import time

from fastapi import FastAPI, Request

from utils.logger import get_logger

log = get_logger("[HTTP]")


def add_request_logging(app: FastAPI) -> None:
    """Одна строка лога на запрос: METHOD path status duration."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        # если call_next упал, ответ отдаст ServerErrorMiddleware с кодом 500
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            log.info(
                f"{request.method} {request.url.path} {status_code} {elapsed_ms:.3f} ms"
            )
