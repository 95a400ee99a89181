"""
FastAPI server for the scheme index.

Routes:
    GET /health                 catalog sizes
    GET /                       index (HTML for browsers, JSON otherwise)
    GET /schemes                scheme names, ?order=alpha|color
    GET /templates              template keys
    GET /{scheme}               raw YAML, JSON (Accept: application/json)
                                or HTML preview (Accept: text/html)
    GET /{scheme}/{template}    template rendered for the scheme

Non-canonical scheme names (other case, fuzzy match) get a 301 to the
canonical path. Catalogs are built before the app is created and handed
in explicitly; handlers only read them.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import (
    HTMLResponse,
    JSONResponse,
    PlainTextResponse,
    RedirectResponse,
    Response,
)

from base16_sh.core.catalogs import Catalogs
from base16_sh.core.config import ServerConfig
from base16_sh.core.models import SchemeOrder
from base16_sh.core.names import sanitize_name
from base16_sh.core.resolver import Resolution
from base16_sh.core.scheme_loader import read_scheme_source

from .exception_handlers import register_exception_handlers
from .rendering import render_page, render_template

logger = logging.getLogger(__name__)

YAML_MEDIA_TYPE = "application/yaml"


# =============================================================================
# Request helpers
# =============================================================================


def _wants_html(request: Request) -> bool:
    """Check if the client asked for HTML (browser navigation)."""
    return "text/html" in request.headers.get("Accept", "")


def _wants_json(request: Request) -> bool:
    """Check if the client asked for JSON."""
    return "application/json" in request.headers.get("Accept", "")


def _canonical_redirect(request: Request, resolution: Resolution, *rest: str) -> RedirectResponse:
    """Permanent redirect to the canonical scheme path, keeping the query string."""
    path = "/".join(["", resolution.name, *rest])
    if request.url.query:
        path = f"{path}?{request.url.query}"
    logger.debug(f"Redirecting {request.url.path} to {path}")
    return RedirectResponse(url=path, status_code=301)


def get_catalogs(request: Request) -> Catalogs:
    """Dependency: the catalogs the app was created with."""
    return request.app.state.catalogs


# =============================================================================
# Application factory
# =============================================================================


def create_app(catalogs: Catalogs, config: ServerConfig | None = None) -> FastAPI:
    """
    Create the FastAPI application around pre-built catalogs.

    Args:
        catalogs: Scheme and template catalogs (read-only from here on)
        config: Server configuration, kept on ``app.state`` for reference

    Returns:
        Configured FastAPI application
    """
    from base16_sh import __version__

    app = FastAPI(
        title="base16.sh",
        description="Color scheme index and template renderer",
        version=__version__,
    )
    app.state.catalogs = catalogs
    app.state.config = config or ServerConfig()

    register_exception_handlers(app)

    @app.get("/health", tags=["System"], summary="Health check")
    def health(catalogs: Catalogs = Depends(get_catalogs)) -> dict[str, Any]:
        return {
            "status": "healthy",
            "schemes": len(catalogs.schemes),
            "templates": len(catalogs.templates),
        }

    @app.get("/", tags=["Index"], summary="Scheme and template index")
    def index(
        request: Request,
        order: SchemeOrder = SchemeOrder.ALPHA,
        catalogs: Catalogs = Depends(get_catalogs),
    ) -> Response:
        schemes = catalogs.list_scheme_names(order)
        templates = catalogs.list_template_names()
        if _wants_html(request):
            html = render_page(
                "index.html",
                schemes=schemes,
                templates=templates,
                order=order.value,
            )
            return HTMLResponse(html)
        return JSONResponse({"schemes": list(schemes), "templates": list(templates)})

    @app.get("/schemes", tags=["Index"], summary="List scheme names")
    def list_schemes(
        order: SchemeOrder = SchemeOrder.ALPHA,
        catalogs: Catalogs = Depends(get_catalogs),
    ) -> list[str]:
        return list(catalogs.list_scheme_names(order))

    @app.get("/templates", tags=["Index"], summary="List template keys")
    def list_templates(catalogs: Catalogs = Depends(get_catalogs)) -> list[str]:
        return list(catalogs.list_template_names())

    @app.get("/{scheme}", tags=["Schemes"], summary="Fetch a scheme")
    def get_scheme(
        scheme: str,
        request: Request,
        order: SchemeOrder = SchemeOrder.ALPHA,
        catalogs: Catalogs = Depends(get_catalogs),
    ) -> Response:
        resolution = catalogs.resolve_scheme(scheme)
        if resolution.redirect:
            return _canonical_redirect(request, resolution)

        record = resolution.record
        headers = {"x-scheme-name": record.name, "x-scheme-system": record.system.value}

        if _wants_html(request):
            definition = catalogs.load_definition(record)
            prev_name, next_name = catalogs.neighbors(record.name, order)
            palette = definition.with_default_slots(definition.system_or(record.system))
            html = render_page(
                "scheme.html",
                record=record,
                scheme=definition,
                system=definition.system_or(record.system).value,
                palette=[(slot, palette[slot].lstrip("#")) for slot in sorted(palette)],
                templates=catalogs.list_template_names(),
                prev_name=prev_name,
                next_name=next_name,
                order=order.value,
            )
            return HTMLResponse(html, headers=headers)

        if _wants_json(request):
            definition = catalogs.load_definition(record)
            return JSONResponse(definition.model_dump(mode="json"), headers=headers)

        return Response(
            content=read_scheme_source(record),
            media_type=YAML_MEDIA_TYPE,
            headers=headers,
        )

    @app.get("/{scheme}/{template}", tags=["Schemes"], summary="Render a template for a scheme")
    def render_scheme_template(
        scheme: str,
        template: str,
        request: Request,
        order: SchemeOrder = SchemeOrder.ALPHA,
        catalogs: Catalogs = Depends(get_catalogs),
    ) -> Response:
        resolution = catalogs.resolve_scheme(scheme)
        if resolution.redirect:
            return _canonical_redirect(request, resolution, sanitize_name(template))

        record = resolution.record
        template_record = catalogs.resolve_template(template)
        prev_name, next_name = catalogs.neighbors(record.name, order)

        rendered = render_template(
            template_record,
            catalogs.derive_variables(record),
            extra={"scheme-prev": prev_name, "scheme-next": next_name},
        )
        return PlainTextResponse(
            rendered,
            headers={"x-scheme-name": record.name, "x-template-name": template_record.key},
        )

    return app


# =============================================================================
# Runner
# =============================================================================


def build_app(config: ServerConfig) -> FastAPI:
    """Build catalogs from ``config`` and wrap them in an app.

    Raises:
        CatalogError: If the scheme root is missing.
    """
    catalogs = Catalogs.build(
        config.schemes_dir,
        config.templates_dir,
        fuzzy_threshold=config.fuzzy_threshold,
    )
    return create_app(catalogs, config)


def run_server(config: ServerConfig) -> None:
    """Build the app and serve it with uvicorn."""
    import uvicorn

    app = build_app(config)
    logger.info(f"listening on {config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
