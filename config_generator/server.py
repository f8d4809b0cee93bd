"""
HTTP service exposing chart generation.

POST /configure takes a JSON object, writes the chart scaffold to the
configured output directory and echoes the object back.
"""

from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from . import logger
from .chart_emitter import ChartEmitter
from .errors import ConfigGeneratorError
from .output_sink import ChartDirectorySink, OutputSink
from .payload_decoder import decode_payload
from .settings import Settings, get_settings
from .tree import to_plain


def create_app(settings: Optional[Settings] = None, sink: Optional[OutputSink] = None) -> FastAPI:
    """Build the FastAPI application

    Args:
        settings: Service settings (read from the environment when omitted)
        sink: Output sink (a ChartDirectorySink on settings.output_dir when omitted)
    """
    settings = settings or get_settings()
    sink = sink or ChartDirectorySink(settings.output_dir)
    emitter = ChartEmitter(sink, chart_metadata=settings.chart_metadata)

    app = FastAPI(title="config-generator", description="Helm chart scaffolding from JSON configuration")
    app.state.settings = settings
    app.state.emitter = emitter

    @app.exception_handler(ConfigGeneratorError)
    async def generation_error_handler(request: Request, exc: ConfigGeneratorError):
        logger.log_error(f"{request.method} {request.url.path} failed: {exc.kind}: {exc}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.kind, "detail": str(exc)},
        )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/configure")
    async def configure(request: Request):
        body = await request.body()
        configs = decode_payload(body)
        # templating and file writes are blocking, keep them off the event loop
        result = await run_in_threadpool(emitter.emit, configs)
        logger.log_success(f"Generated {', '.join(result.destinations)}")
        return JSONResponse(content=to_plain(configs))

    return app


def serve(settings: Settings):
    """Run the service with uvicorn until interrupted"""
    logger.log_info(f"Writing charts to {settings.output_dir.resolve()}")
    logger.log_info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
