"""
Event mapping.

Turns the typed events of one function into variant-neutral ResolvedTriggers,
applying per-kind defaults. HTTP events also record a RouteEntry in the
route accumulator of the current assembly pass.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..models.resolved import (
    HTTP,
    LOG,
    MESSAGE_QUEUE,
    OBJECT_STORAGE,
    TIMER,
    ResolvedTrigger,
    RouteEntry,
)
from ..models.spec import (
    Event,
    FunctionSpec,
    HTTPEvent,
    LogEvent,
    MQEvent,
    ObjectStorageEvent,
    TimerEvent,
)
from .methods import normalize_methods

logger = logging.getLogger(__name__)

DEFAULT_ROUTE_PATH = "/*"
DEFAULT_LOG_RETRY_TIME = 1
DEFAULT_LOG_INTERVAL = 30
DEFAULT_MQ_STRATEGY = "BACKOFF_RETRY"
MQ_NOTIFY_CONTENT_FORMAT = "JSON"


@dataclass
class MappingContext:
    """Per-function inputs shared by every event of that function."""

    function_name: str
    auth_type: str
    service_name: Optional[str]
    routes: List[RouteEntry]


def _map_http(evt: HTTPEvent, ctx: MappingContext) -> ResolvedTrigger:
    methods = normalize_methods(evt.method)
    ctx.routes.append(
        RouteEntry(
            path=evt.path or DEFAULT_ROUTE_PATH,
            service_name=ctx.service_name,
            function_name=ctx.function_name,
            methods=tuple(methods),
        )
    )
    return ResolvedTrigger(
        kind=HTTP,
        explicit_name=evt.name,
        config={
            "auth_type": ctx.auth_type,
            "methods": methods,
            "role": evt.role,
            "qualifier": evt.version,
        },
    )


def _map_timer(evt: TimerEvent, ctx: MappingContext) -> ResolvedTrigger:
    if evt.type == "every":
        expression = f"@every {evt.value}"
    else:
        expression = evt.value
    return ResolvedTrigger(
        kind=TIMER,
        explicit_name=evt.name,
        config={
            "cron_expression": expression,
            "enable": evt.enable is not False,
            "payload": evt.payload,
            "qualifier": evt.version,
        },
    )


def _map_log(evt: LogEvent, ctx: MappingContext) -> ResolvedTrigger:
    return ResolvedTrigger(
        kind=LOG,
        explicit_name=evt.name,
        config={
            "source_logstore": evt.source,
            "max_retry_time": evt.retry_time or DEFAULT_LOG_RETRY_TIME,
            "trigger_interval": evt.interval or DEFAULT_LOG_INTERVAL,
            "project": evt.project,
            "logstore": evt.log,
            "enable": True,
            "role": evt.role,
            "qualifier": evt.version,
        },
    )


def _map_object_storage(evt: ObjectStorageEvent, ctx: MappingContext) -> ResolvedTrigger:
    return ResolvedTrigger(
        kind=OBJECT_STORAGE,
        explicit_name=evt.name,
        config={
            "bucket": evt.bucket,
            "events": list(evt.events),
            "prefix": evt.filter.prefix,
            "suffix": evt.filter.suffix,
            "enable": True,
            "role": evt.role,
            "qualifier": evt.version,
        },
    )


def _map_message_queue(evt: MQEvent, ctx: MappingContext) -> ResolvedTrigger:
    return ResolvedTrigger(
        kind=MESSAGE_QUEUE,
        explicit_name=evt.name,
        config={
            "topic": evt.topic,
            "notify_content_format": MQ_NOTIFY_CONTENT_FORMAT,
            "notify_strategy": evt.strategy or DEFAULT_MQ_STRATEGY,
            "region": evt.region,
            "filter_tag": evt.tags,
            "role": evt.role,
            "qualifier": evt.version,
        },
    )


_MAPPERS: Dict[str, Callable[[Event, MappingContext], ResolvedTrigger]] = {
    HTTP: _map_http,
    TIMER: _map_timer,
    LOG: _map_log,
    OBJECT_STORAGE: _map_object_storage,
    MESSAGE_QUEUE: _map_message_queue,
}


def map_events(function_spec: FunctionSpec, ctx: MappingContext) -> List[ResolvedTrigger]:
    """
    Map every event of a function, in declaration order.

    Events of an unknown kind are skipped.
    """
    triggers = []
    for evt in function_spec.events:
        mapper = _MAPPERS.get(evt.kind)
        if mapper is None:
            logger.debug(f"Skipping unsupported event kind: {evt.kind}")
            continue
        triggers.append(mapper(evt, ctx))
    return triggers
