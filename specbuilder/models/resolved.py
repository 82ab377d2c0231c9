"""
Where: specbuilder/models/resolved.py
What: Variant-neutral intermediate result produced by the assembler.
Why: Both output serializers read the same resolved data; mapping rules live in one place.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Trigger kinds, matching the `kind` discriminator of the input events.
HTTP = "http"
TIMER = "timer"
LOG = "log"
OBJECT_STORAGE = "objectStorage"
MESSAGE_QUEUE = "messageQueue"

# Default trigger name prefixes per kind.
_NAME_PREFIXES = {
    HTTP: "http",
    TIMER: "timer",
    LOG: "log",
    OBJECT_STORAGE: "oss",
    MESSAGE_QUEUE: "mq",
}


@dataclass(frozen=True)
class RouteEntry:
    """One custom-domain route, accumulated across all functions."""

    path: str
    service_name: Optional[str]
    function_name: str
    methods: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedTrigger:
    """
    A mapped event with all per-kind defaults applied.

    config holds the kind-specific settings under flat snake_case keys;
    serializers only rename and nest them.
    """

    kind: str
    explicit_name: Optional[str]
    config: Dict[str, Any]

    def resolve_name(self, function_name: str, qualified: bool) -> str:
        """
        Trigger name: the declared one, else `<prefix>` or `<prefix>-<function>`.

        HTTP triggers are always qualified with the function name.
        """
        if self.explicit_name:
            return self.explicit_name
        prefix = _NAME_PREFIXES[self.kind]
        if qualified or self.kind == HTTP:
            return f"{prefix}-{function_name}"
        return prefix


@dataclass(frozen=True)
class ResolvedFunction:
    """A function with its cascading defaults resolved."""

    key: str
    name: str
    description: str
    handler: str
    initializer: str
    runtime: str
    code_uri: str
    timeout: int
    init_timeout: int
    memory_size: int
    concurrency: int
    environment: Dict[str, Any]
    triggers: List[ResolvedTrigger] = field(default_factory=list)


@dataclass(frozen=True)
class ResolvedDomain:
    """Custom domain carrying the full route table."""

    domain_name: str
    auto: bool
    routes: List[RouteEntry]


@dataclass(frozen=True)
class ResolvedService:
    """Output of one assembly pass."""

    name: Optional[str]
    description: Optional[str]
    provider: Any
    region: Optional[str]
    access: str
    functions: List[ResolvedFunction]
    routes: List[RouteEntry]
    domain: Optional[ResolvedDomain] = None
