from fastapi import FastAPI, Depends, Form, Request
from fastapi.responses import JSONResponse
from typing import Optional

from .config import FLOW_RUNNER
from .flow_client import get_flow_runner
from .logger import log_info, log_warning, configure_logger_from_config
from .models import OutputEnvelope
from .services.check_service import CheckService, build_check_service
from .services.clock import now_utc
from .services.templates import get_template_renderer
from .services.zones import get_zone_registry

VERSION = "0.1.0"

# Configure logger with settings from config
configure_logger_from_config()

app = FastAPI(title="Domain Check API", version=VERSION)

log_info("Domain Check API starting up")

# Built on startup; read-only afterwards
check_service: Optional[CheckService] = None

# The body is plain JSON without a safety prefix, so it must never contain
# anything the caller controls. Do not add the domain name to it.
CHECK_RESPONSE_HEADERS = {
    "Content-Disposition": "attachment",
    "X-Content-Type-Options": "nosniff",
    "Access-Control-Allow-Origin": "*",
}


@app.on_event("startup")
def startup_event():
    """Build the template environment, zone registry and flow runner once."""
    global check_service

    get_template_renderer()
    zones = get_zone_registry()
    if not zones.zones:
        log_warning("MANAGED_TLDS is empty, every check will be rejected", action="zones_empty")

    runner = get_flow_runner()
    check_service = build_check_service(runner, zones=zones)

    log_info(
        "Check service initialized",
        action="check_service_ready",
        runner=runner.get_runner_name(),
        zone_count=len(zones.zones),
    )


def get_check_service() -> CheckService:
    if check_service is None:
        raise RuntimeError("Check service not initialized")
    return check_service


def envelope_response(envelope: OutputEnvelope) -> JSONResponse:
    return JSONResponse(
        content=envelope.model_dump(),
        headers=CHECK_RESPONSE_HEADERS,
        media_type="application/json; charset=utf-8",
    )


@app.get("/health")
def health():
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        - ok: Overall health status (true/false)
        - checks: Individual component health statuses
        - version: API version
        - timestamp: Current server time
    """
    health_status = {
        "ok": True,
        "version": VERSION,
        "timestamp": now_utc().isoformat(),
        "checks": {}
    }

    zones = get_zone_registry()
    if zones.zones:
        health_status["checks"]["zones"] = {
            "status": "ok",
            "message": f"{len(zones.zones)} managed zone(s)"
        }
    else:
        health_status["ok"] = False
        health_status["checks"]["zones"] = {
            "status": "error",
            "message": "No managed zones configured"
        }

    if check_service is not None:
        health_status["checks"]["flow_runner"] = {
            "status": "ok",
            "message": f"Flow runner '{check_service.bridge.runner.get_runner_name()}' ready"
        }
    else:
        health_status["ok"] = False
        health_status["checks"]["flow_runner"] = {
            "status": "error",
            "message": f"Flow runner '{FLOW_RUNNER}' not initialized"
        }

    return health_status


@app.get("/check")
def check_domain(
    domain: Optional[str] = None,
    service: CheckService = Depends(get_check_service),
):
    """
    Check availability and fee tier of a single domain.

    Query parameters:
        domain: Domain name to check (required)

    Returns one of:
        {"status": "success", "available": true, "tier": "..."}
        {"status": "success", "available": false, "reason": "..."}
        {"status": "error", "reason": "..."}
    """
    return envelope_response(service.check(domain))


@app.post("/check")
def check_domain_form(
    request: Request,
    domain: Optional[str] = Form(None),
    service: CheckService = Depends(get_check_service),
):
    """Form-encoded variant of GET /check; falls back to the query string."""
    if domain is None:
        domain = request.query_params.get("domain")
    return envelope_response(service.check(domain))
