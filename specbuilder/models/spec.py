"""
Abstract spec models.

Defines the provider-agnostic application descriptor (f.yml) as Pydantic models.
Keys are accepted in camelCase as written in f.yml, or by field name.
"""

import logging
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class SpecModel(BaseModel):
    """
    Base model: camelCase aliases, unknown keys ignored.

    Numbers are accepted where a string is expected. A key whose value still
    fails validation is dropped, so the field falls back to its default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="wrap")
    @classmethod
    def drop_invalid_fields(cls, data: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(data)
        except ValidationError as e:
            if not isinstance(data, dict):
                raise
            invalid = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
            if not invalid:
                raise
            logger.debug(f"Ignoring invalid {cls.__name__} field(s): {sorted(invalid)}")
            kept = {
                key: value
                for key, value in data.items()
                if key not in invalid and to_camel(str(key)) not in invalid
            }
            return handler(kept)


# =============================================================================
# Events
# =============================================================================


class HTTPEvent(SpecModel):
    """HTTP trigger."""

    kind: Literal["http"] = "http"
    name: Optional[str] = None
    path: Optional[str] = None
    method: Union[str, List[str], None] = None
    role: Optional[str] = None
    version: Union[str, int, None] = None


class TimerEvent(SpecModel):
    """Timer trigger (cron expression or `every` shorthand)."""

    kind: Literal["timer"] = "timer"
    name: Optional[str] = None
    type: Optional[str] = None
    value: Union[str, int, None] = None
    enable: Optional[bool] = None
    payload: Any = None
    version: Union[str, int, None] = None


class LogEvent(SpecModel):
    """Log service trigger."""

    kind: Literal["log"] = "log"
    name: Optional[str] = None
    source: Optional[str] = None
    retry_time: Optional[int] = None
    interval: Optional[int] = None
    project: Optional[str] = None
    log: Optional[str] = None
    role: Optional[str] = None
    version: Union[str, int, None] = None


class ObjectStorageFilter(SpecModel):
    prefix: Optional[str] = None
    suffix: Optional[str] = None


class ObjectStorageEvent(SpecModel):
    """Object storage trigger. Written as `os`, `oss` or `cos` in f.yml."""

    kind: Literal["objectStorage"] = "objectStorage"
    name: Optional[str] = None
    bucket: Optional[str] = None
    events: List[str] = Field(default_factory=list)
    filter: ObjectStorageFilter = Field(default_factory=ObjectStorageFilter)
    role: Optional[str] = None
    version: Union[str, int, None] = None

    @field_validator("events", mode="before")
    @classmethod
    def coerce_events(cls, v: Any) -> List[Any]:
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return list(v)
        return [v]

    @field_validator("filter", mode="before")
    @classmethod
    def coerce_filter(cls, v: Any) -> Any:
        return v or {}


class MQEvent(SpecModel):
    """Message queue (MNS topic) trigger."""

    kind: Literal["messageQueue"] = "messageQueue"
    name: Optional[str] = None
    topic: Optional[str] = None
    strategy: Optional[str] = None
    region: Optional[str] = None
    tags: Any = None
    role: Optional[str] = None
    version: Union[str, int, None] = None


Event = Annotated[
    Union[HTTPEvent, TimerEvent, LogEvent, ObjectStorageEvent, MQEvent],
    Field(discriminator="kind"),
]

_event_adapter = TypeAdapter(Event)

# Dispatch order within a single raw event. Object storage aliases share one kind.
_EVENT_KEYS = (
    ("http", ("http",)),
    ("timer", ("timer",)),
    ("log", ("log",)),
    ("objectStorage", ("os", "oss", "cos")),
    ("messageQueue", ("mq",)),
)


def _is_set(value: Any) -> bool:
    # An empty mapping (`http: {}`) still declares the kind.
    if isinstance(value, (dict, list)):
        return True
    return value not in (None, False, "", 0)


def expand_raw_event(raw: Any) -> List[Any]:
    """
    Expand one raw f.yml event into typed events.

    A raw event may carry several kinds at once ({http: ..., timer: ...});
    each present kind yields its own typed event. Unknown shapes yield nothing;
    a badly typed field of a known kind falls back to its default.
    """
    if not isinstance(raw, dict):
        return []

    events = []
    for kind, keys in _EVENT_KEYS:
        payload = next((raw[k] for k in keys if _is_set(raw.get(k))), None)
        if payload is None:
            continue
        if not isinstance(payload, dict):
            payload = {}
        events.append(_event_adapter.validate_python({**payload, "kind": kind}))
    return events


# =============================================================================
# Functions / Provider / Service
# =============================================================================


class FunctionSpec(SpecModel):
    """One function entry of the `functions` map."""

    name: Optional[str] = None
    handler: Optional[str] = None
    initializer: Optional[str] = None
    description: Optional[str] = None
    code_uri: Optional[str] = None
    runtime: Optional[str] = None
    timeout: Optional[int] = None
    init_timeout: Optional[int] = None
    memory_size: Optional[int] = None
    concurrency: Optional[int] = None
    environment: Dict[str, Any] = Field(default_factory=dict)
    auth_type: Optional[str] = None
    events: List[Event] = Field(default_factory=list)

    @field_validator("environment", mode="before")
    @classmethod
    def coerce_environment(cls, v: Any) -> Any:
        return v or {}

    @field_validator("events", mode="before")
    @classmethod
    def expand_events(cls, v: Any) -> List[Any]:
        if not v:
            return []
        if not isinstance(v, (list, tuple)):
            return v
        expanded = []
        for raw in v:
            # Already-typed events pass through untouched.
            if isinstance(raw, BaseModel):
                expanded.append(raw)
            else:
                expanded.extend(expand_raw_event(raw))
        return expanded


class ProviderSpec(SpecModel):
    """Provider-level defaults and service settings."""

    name: Optional[str] = None
    runtime: Optional[str] = None
    timeout: Optional[int] = None
    init_timeout: Optional[int] = None
    memory_size: Optional[int] = None
    concurrency: Optional[int] = None
    environment: Dict[str, Any] = Field(default_factory=dict)
    auth_type: Optional[str] = None
    role: Optional[str] = None
    internet_access: Optional[bool] = None
    vpc_config: Optional[Dict[str, Any]] = None
    policies: Any = None
    log_config: Optional[Dict[str, Any]] = None
    nas_config: Optional[Dict[str, Any]] = None
    async_configuration: Optional[Dict[str, Any]] = None
    tracing_config: Any = None
    region: Optional[str] = None
    access: Optional[str] = None

    @field_validator("environment", mode="before")
    @classmethod
    def coerce_environment(cls, v: Any) -> Any:
        return v or {}


class ServiceSpec(SpecModel):
    name: Optional[str] = None
    description: Optional[str] = None


class CustomDomainSpec(SpecModel):
    domain_name: str = "auto"

    @field_validator("domain_name", mode="before")
    @classmethod
    def default_domain_name(cls, v: Any) -> Any:
        return v or "auto"


class CustomSpec(SpecModel):
    """
    The `custom` section.

    custom_domain is a CustomDomainSpec when configured, False when explicitly
    disabled, and None when absent.
    """

    custom_domain: Union[Literal[False], CustomDomainSpec, None] = None

    @field_validator("custom_domain", mode="before")
    @classmethod
    def coerce_custom_domain(cls, v: Any) -> Any:
        if v is True:
            return {}
        if v is False:
            return v
        # Any other falsy value counts as absent.
        if not v and not isinstance(v, dict):
            return None
        if isinstance(v, str):
            return {"domainName": v}
        return v


class AbstractSpec(SpecModel):
    """Top-level f.yml descriptor."""

    provider: ProviderSpec = Field(default_factory=ProviderSpec)
    service: ServiceSpec = Field(default_factory=ServiceSpec)
    functions: Dict[str, FunctionSpec] = Field(default_factory=dict)
    custom: CustomSpec = Field(default_factory=CustomSpec)

    @field_validator("service", mode="before")
    @classmethod
    def coerce_service(cls, v: Any) -> Any:
        if isinstance(v, str):
            return {"name": v}
        return v or {}

    @field_validator("provider", "custom", mode="before")
    @classmethod
    def coerce_section(cls, v: Any) -> Any:
        return v or {}

    @field_validator("functions", mode="before")
    @classmethod
    def coerce_functions(cls, v: Any) -> Any:
        if not v or not isinstance(v, dict):
            return {}
        return {
            key: (value if isinstance(value, (dict, FunctionSpec)) else {})
            for key, value in v.items()
        }
