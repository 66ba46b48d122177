"""MPN MCP Server - classify part numbers and score replacement candidates."""

import logging
import time
from collections import deque
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.routing import Route

from . import __version__
from .config import (
    DEFAULT_PROFILE,
    HTTP_PORT,
    LOG_LEVEL,
    MAX_MPN_LENGTH,
    MAX_TEXT_LENGTH,
    RATE_LIMIT_MAX_CLIENTS,
    RATE_LIMIT_REQUESTS,
    RATE_LIMIT_WINDOW,
)
from .engine import get_engine
from .similarity import SimilarityProfile, get_metadata_registry, get_profile
from .types import ALL_TYPES, ComponentType

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    """Build the engine on startup (not on first request)."""
    engine = get_engine()
    logger.info(f"Engine loaded: {len(engine.providers)} providers, {len(engine.registry)} patterns")
    yield


# Create MCP server
mcp = FastMCP(
    name="mpn",
    instructions="Electronic part number (MPN) classification and replacement scoring. No auth required. Use classify_part to identify what a part number is, part_details for package/series, and compare_parts to score whether one part can replace another (1.0 = same part, 0.0 = incompatible).",
    lifespan=lifespan,
)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window request limit per client address.

    Each address gets `limit` calls per `window` seconds. The client table
    holds at most `max_clients` entries; while it is full of live clients,
    new addresses are turned away until older entries age out.
    """

    def __init__(
        self,
        app,
        limit: int = RATE_LIMIT_REQUESTS,
        window: float = RATE_LIMIT_WINDOW,
        max_clients: int = RATE_LIMIT_MAX_CLIENTS,
    ):
        super().__init__(app)
        self.limit = limit
        self.window = window
        self.max_clients = max_clients
        self.hits: dict[str, deque[float]] = {}
        self._next_sweep = time.monotonic() + window

    @staticmethod
    def client_key(request) -> str:
        """Last X-Forwarded-For hop (added by the fronting proxy), else the peer address."""
        forwarded = request.headers.get("x-forwarded-for", "")
        hops = [hop.strip() for hop in forwarded.split(",") if hop.strip()]
        if hops:
            return hops[-1]
        return request.client.host if request.client else "unknown"

    def sweep(self, now: float) -> None:
        """Forget clients with no calls inside the current window."""
        cutoff = now - self.window
        idle = [key for key, stamps in self.hits.items() if not stamps or stamps[-1] <= cutoff]
        for key in idle:
            del self.hits[key]
        self._next_sweep = now + self.window

    def allow(self, key: str, now: float | None = None) -> bool:
        if now is None:
            now = time.monotonic()
        if now >= self._next_sweep:
            self.sweep(now)

        stamps = self.hits.get(key)
        if stamps is None:
            if len(self.hits) >= self.max_clients:
                self.sweep(now)
            if len(self.hits) >= self.max_clients:
                logger.warning(f"Rate limiter full ({len(self.hits)} clients), refusing {key}")
                return False
            stamps = self.hits[key] = deque()

        cutoff = now - self.window
        while stamps and stamps[0] <= cutoff:
            stamps.popleft()
        if len(stamps) >= self.limit:
            return False
        stamps.append(now)
        return True

    async def dispatch(self, request, call_next):
        if request.url.path == "/health" or self.allow(self.client_key(request)):
            return await call_next(request)
        retry_after = int(self.window)
        return JSONResponse(
            {"error": f"Too many requests; limit is {self.limit} per {retry_after}s", "retry_after": retry_after},
            status_code=429,
            headers={"Retry-After": str(retry_after)},
        )


# Helpers

def _validate_mpn(mpn: str | None, field: str = "mpn") -> str:
    if not mpn or not mpn.strip():
        raise ValueError(f"{field} is required")
    if len(mpn) > MAX_MPN_LENGTH:
        raise ValueError(f"{field} too long (max {MAX_MPN_LENGTH} characters)")
    return mpn.strip()


def _resolve_profile(name: str | None) -> SimilarityProfile:
    profile = get_profile(name or DEFAULT_PROFILE)
    if profile is None:
        valid = ", ".join(p.name for p in SimilarityProfile)
        raise ValueError(f"Unknown profile {name!r}. Valid profiles: {valid}")
    return profile


def _type_name(component_type: ComponentType | None) -> str:
    return component_type.name if component_type else "unknown"


def _type_info(component_type: ComponentType | None) -> dict:
    if component_type is None:
        return {"type": "unknown"}
    return {
        "type": component_type.name,
        "family": component_type.family.name,
        "lineage": [node.name for node in component_type.lineage()],
        "manufacturer": component_type.manufacturer,
    }


# Tools

@mcp.tool(
    annotations=ToolAnnotations(
        title="Classify Part Number",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def classify_part(mpn: str) -> dict:
    """Identify what kind of component a manufacturer part number is.

    Args:
        mpn: Manufacturer part number, e.g. "LM358N", "GRM188R71H104KA93D"

    Returns:
        type: Most specific component type (e.g. OPAMP_TI), or "unknown"
        family: Root of the type tree (e.g. IC)
        lineage: Type followed by its more generic bases
        manufacturer: Manufacturer for vendor-specific types, else null
    """
    try:
        mpn = _validate_mpn(mpn)
    except ValueError as e:
        return {"error": str(e)}

    component_type = get_engine().classify(mpn)
    return {"mpn": mpn.upper(), **_type_info(component_type)}


@mcp.tool(
    annotations=ToolAnnotations(
        title="Compare Parts",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def compare_parts(mpn1: str, mpn2: str, profile: str | None = None) -> dict:
    """Score whether mpn2 can replace mpn1.

    Args:
        mpn1: Original part number
        mpn2: Candidate replacement part number
        profile: DESIGN_PHASE, REPLACEMENT (default), COST_OPTIMIZATION,
            PERFORMANCE_UPGRADE or EMERGENCY_SOURCING. Controls how strictly
            specs are weighed and the pass threshold.

    Returns:
        score: 0.0 (incompatible) to 1.0 (same part)
        comparator: Which comparator decided ("exact", "opamp", "default", ...)
        type1, type2: Resolved component types
        meets_threshold: Whether the score passes the profile's minimum
        official_replacement: Manufacturer declares the parts interchangeable
    """
    try:
        mpn1 = _validate_mpn(mpn1, "mpn1")
        mpn2 = _validate_mpn(mpn2, "mpn2")
        similarity_profile = _resolve_profile(profile)
    except ValueError as e:
        return {"error": str(e)}

    engine = get_engine()
    result = engine.explain(mpn1, mpn2, similarity_profile)
    return {
        **result.to_dict(),
        "official_replacement": engine.is_official_replacement(mpn1, mpn2),
    }


@mcp.tool(
    annotations=ToolAnnotations(
        title="Part Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def part_details(mpn: str) -> dict:
    """Everything that can be read from a part number alone.

    Args:
        mpn: Manufacturer part number

    Returns:
        type: Most specific component type, or "unknown"
        package: Standard package name from the ordering code ("" if unknown)
        series: Part series (e.g. LM358 for LM358N, "" if unknown)
        manufacturer_provider: Provider that recognized the part, or null
        matching_types: Every type the part number matches
    """
    try:
        mpn = _validate_mpn(mpn)
    except ValueError as e:
        return {"error": str(e)}

    engine = get_engine()
    provider = engine.resolver.find_provider(mpn)
    return {
        "mpn": mpn.upper(),
        **_type_info(engine.classify(mpn)),
        "package": engine.extract_package_code(mpn),
        "series": engine.extract_series(mpn),
        "manufacturer_provider": provider.name if provider else None,
        "matching_types": [_type_name(t) for t in engine.matching_types(mpn)],
    }


@mcp.tool(
    annotations=ToolAnnotations(
        title="Find Part in Text",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def find_part_in_text(text: str) -> dict:
    """Pull the first recognizable part number out of free text (BOM line, description).

    Args:
        text: e.g. "U1 MPN: LM358DR dual op-amp"

    Returns:
        mpn: The part number found, or null
        type: Its component type when found
    """
    if not text or not text.strip():
        return {"error": "text is required"}
    if len(text) > MAX_TEXT_LENGTH:
        return {"error": f"Text too long (max {MAX_TEXT_LENGTH} characters)"}

    engine = get_engine()
    mpn = engine.find_mpn_in_text(text)
    if mpn is None:
        return {"mpn": None}
    return {"mpn": mpn, **_type_info(engine.classify(mpn))}


@mcp.tool(
    annotations=ToolAnnotations(
        title="List Component Types",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def list_component_types(include_manufacturer_types: bool = False) -> dict:
    """List the component type taxonomy and which types have spec-aware comparison.

    Args:
        include_manufacturer_types: Also list vendor-specific types (OPAMP_TI, ...)

    Returns:
        types: [{name, base_type, manufacturer, spec_aware}]
        profiles: Similarity profiles with description and minimum score
    """
    metadata = get_metadata_registry()
    types = []
    for component_type in ALL_TYPES:
        if component_type.is_manufacturer_qualified and not include_manufacturer_types:
            continue
        types.append({
            "name": component_type.name,
            "base_type": component_type.base_type.name if component_type.base_type else None,
            "manufacturer": component_type.manufacturer,
            "spec_aware": metadata.get(component_type) is not None,
        })
    profiles = [
        {"name": p.name, "description": p.description, "minimum_score": p.minimum_score}
        for p in SimilarityProfile
    ]
    return {"types": types, "profiles": profiles}


@mcp.tool(
    annotations=ToolAnnotations(
        title="Server Version",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def get_version() -> dict:
    """Server version and loaded providers."""
    engine = get_engine()
    return {
        "version": __version__,
        "providers": [p.provider_id for p in engine.providers],
        "comparators": [c.name for c in engine.pipeline.comparators],
    }


async def health(request):
    """Liveness probe; also reports what the shared engine has loaded."""
    engine = get_engine()
    return JSONResponse({
        "status": "ok",
        "version": __version__,
        "providers": len(engine.providers),
        "patterns": len(engine.registry),
    })


def create_app():
    """Streamable-HTTP MCP app at /mcp, rate limited, plus /health."""
    app = mcp.http_app(
        path="/mcp",
        middleware=[Middleware(RateLimitMiddleware)],
        transport="streamable-http",
        stateless_http=True,
    )
    app.routes.append(Route("/health", health))
    return app


app = create_app()


class _QuietHealthChecks(logging.Filter):
    """Drops uvicorn access-log lines for GET /health."""

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn.access args: (client, method, path, http_version, status)
        args = record.args
        if isinstance(args, tuple) and len(args) >= 3:
            return args[2] != "/health"
        return "/health" not in record.getMessage()


def main():
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s - %(message)s")
    logging.getLogger("uvicorn.access").addFilter(_QuietHealthChecks())
    logger.info(f"mpn-mcp {__version__} listening on port {HTTP_PORT}")
    uvicorn.run("mpn_mcp.server:app", host="0.0.0.0", port=HTTP_PORT, lifespan="on")


if __name__ == "__main__":
    main()
