"""Logfire setup for the Folio API.

Services and repositories call ``logfire`` directly::

    with logfire.span("engagement_service.toggle_like", post_id=str(post_id)):
        logfire.info("Like toggled", post_id=str(post_id), liked=liked)

This module only decides where those spans go and which libraries are
traced automatically.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from folio.config import Settings

SERVICE_NAME = "folio-api"

# Polled by load balancers, not worth a trace each
UNTRACED_URLS = "/health,/health/cors"


def should_send_to_logfire(settings: Settings) -> bool:
    """An explicit flag wins, otherwise a token turns cloud export on."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running environment.

    Spans always reach the console; they are exported to Logfire only when
    ``should_send_to_logfire`` says so.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _discovery_attributes(request, attributes):
    # Search facets are the interesting part of a /posts request
    result = {**attributes}
    params = request.query_params
    for name in ("text", "author_id", "category_id", "date_range", "related_to"):
        if params.get(name):
            result[name] = params[name]
    tags = params.getlist("tags")
    if tags:
        result["tags"] = tags
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health checks."""
    logfire.instrument_fastapi(
        app,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_discovery_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL issued by the repositories."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
