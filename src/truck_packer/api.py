"""FastAPI endpoint for the truck packer."""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from truck_packer.config import configure_logging, get_settings
from truck_packer.errors import InvalidContainerSize, ItemTooLarge
from truck_packer.io.schemas import PackRequest, PackResponse
from truck_packer.metrics import compute_metrics
from truck_packer.packing.engine import pack

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Logging is set up when the server starts, not on import
    configure_logging(settings)
    yield


# FastAPI app instance (exactly one)
app = FastAPI(
    title="Truck Packer API",
    description="2D truck load packing service",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.cors_origin_regex,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)


def error_response(error: str, summary: str, details: list[str], **extra: Any) -> Response:
    """Friendly 422 body for packing failures the caller can fix."""
    body = {"error": error, "summary": summary, "details": details, **extra}
    return Response(
        content=json.dumps(body),
        status_code=422,
        media_type="application/json",
    )


@app.post("/pack")
async def pack_scenario(request: PackRequest) -> Any:
    """
    Pack a scenario and return the container layout.

    Input (request body):
        {
            "truckWidth": 1200,
            "truckHeight": 800,
            "allowRotate": true,
            "margin": 0,
            "items": [
                { "id": 1, "name": "Box A", "width": 400, "height": 300, "quantity": 2 }
            ]
        }

    Returns:
        { "count": ..., "containers": [[placed item, ...], ...], "metrics": {...} }
    """
    try:
        items = request.to_items()
        options = request.to_options(default_strategy=settings.default_strategy)
        result = pack(items, request.truck_width, request.truck_height, options)
        metrics = compute_metrics(result, request.truck_width, request.truck_height)

        logger.info(
            f"containers={result.count}, units={metrics['total_units']}, "
            f"fill_rate={metrics['fill_rate']:.3f}, strategy={options.strategy}"
        )
        return PackResponse.from_result(result, metrics)

    except InvalidContainerSize as e:
        logger.warning(f"Rejected pack request: {e}")
        return error_response(
            "INVALID_CONTAINER_SIZE",
            "Truck width and height must both be greater than zero.",
            [str(e)],
        )
    except ItemTooLarge as e:
        logger.warning(f"Rejected pack request: {e}")
        return error_response(
            "ITEM_TOO_LARGE",
            "An item does not fit in the truck. Shrink it, enlarge the truck or allow rotation.",
            [str(e)],
            item_id=e.item_id,
        )
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {"ok": True}
