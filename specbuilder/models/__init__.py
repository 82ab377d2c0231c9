"""
Data model definitions package.

Aggregates the input spec models and the resolved intermediate types.
"""

from .resolved import (
    ResolvedDomain,
    ResolvedFunction,
    ResolvedService,
    ResolvedTrigger,
    RouteEntry,
)
from .spec import (
    AbstractSpec,
    CustomDomainSpec,
    Event,
    FunctionSpec,
    HTTPEvent,
    LogEvent,
    MQEvent,
    ObjectStorageEvent,
    ProviderSpec,
    ServiceSpec,
    TimerEvent,
)

__all__ = [
    "AbstractSpec",
    "CustomDomainSpec",
    "Event",
    "FunctionSpec",
    "HTTPEvent",
    "LogEvent",
    "MQEvent",
    "ObjectStorageEvent",
    "ProviderSpec",
    "ServiceSpec",
    "TimerEvent",
    "ResolvedDomain",
    "ResolvedFunction",
    "ResolvedService",
    "ResolvedTrigger",
    "RouteEntry",
]
