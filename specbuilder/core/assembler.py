"""
Function/service assembly.

Resolves cascading defaults (function > provider > literal) for every
function, merges environment variables, maps events and collects the HTTP
route table into one ResolvedService. Both output variants serialize this
result.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..models.resolved import ResolvedFunction, ResolvedService, RouteEntry
from ..models.spec import AbstractSpec, FunctionSpec, ProviderSpec
from .domain import resolve_custom_domain
from .event_mapper import MappingContext, map_events

logger = logging.getLogger(__name__)

DEFAULT_HANDLER = "index.handler"
DEFAULT_ACCESS = "default"

# Literal fallbacks used when neither the function nor the provider sets a value.
FUNCTION_DEFAULTS: Dict[str, Any] = {
    "runtime": "nodejs14",
    "timeout": 3,
    "init_timeout": 3,
    "memory_size": 128,
    "concurrency": 1,
    "auth_type": "ANONYMOUS",
}


def resolve_default(field: str, *sources: Any, default: Any = None) -> Any:
    """
    Return the first truthy `field` among sources, else `default`.

    Sources are models or mappings, highest precedence first. When default is
    omitted the literal from FUNCTION_DEFAULTS is used.
    """
    for source in sources:
        if source is None:
            continue
        if isinstance(source, Mapping):
            value = source.get(field)
        else:
            value = getattr(source, field, None)
        if value:
            return value
    if default is None:
        return FUNCTION_DEFAULTS.get(field)
    return default


def derive_initializer(handler: str) -> str:
    """`index.handler` -> `index.initializer` (module path of the handler)."""
    module_path = ".".join(handler.split(".")[:-1])
    return f"{module_path}.initializer"


def merge_environment(
    provider: ProviderSpec,
    function_spec: FunctionSpec,
    user_env: Mapping[str, Any],
) -> Dict[str, Any]:
    """Merge env vars: provider < function < user-defined."""
    return {**provider.environment, **function_spec.environment, **user_env}


def assemble_function(
    key: str,
    function_spec: FunctionSpec,
    provider: ProviderSpec,
    service_name: Optional[str],
    user_env: Mapping[str, Any],
    routes: List[RouteEntry],
) -> ResolvedFunction:
    """Resolve one function entry and map its events."""
    name = function_spec.name or key
    handler = function_spec.handler or DEFAULT_HANDLER

    ctx = MappingContext(
        function_name=name,
        auth_type=resolve_default("auth_type", function_spec, provider),
        service_name=service_name,
        routes=routes,
    )

    return ResolvedFunction(
        key=key,
        name=name,
        description=function_spec.description or "",
        handler=handler,
        initializer=function_spec.initializer or derive_initializer(handler),
        runtime=resolve_default("runtime", function_spec, provider),
        code_uri=function_spec.code_uri or ".",
        timeout=resolve_default("timeout", function_spec, provider),
        init_timeout=resolve_default("init_timeout", function_spec, provider),
        memory_size=resolve_default("memory_size", function_spec, provider),
        concurrency=resolve_default("concurrency", function_spec, provider),
        environment=merge_environment(provider, function_spec, user_env),
        triggers=map_events(function_spec, ctx),
    )


def assemble(
    spec: AbstractSpec,
    user_env: Optional[Mapping[str, Any]] = None,
    default_access: str = DEFAULT_ACCESS,
) -> ResolvedService:
    """
    Run one assembly pass over an abstract spec.

    The route accumulator lives only for this call. default_access is the
    credential alias used when the provider names none.
    """
    user_env = user_env or {}
    provider = spec.provider
    service_name = spec.service.name
    routes: List[RouteEntry] = []

    functions = [
        assemble_function(key, function_spec, provider, service_name, user_env, routes)
        for key, function_spec in spec.functions.items()
    ]
    logger.debug(f"Assembled {len(functions)} function(s), {len(routes)} route(s)")

    return ResolvedService(
        name=service_name,
        description=spec.service.description,
        provider=provider,
        region=provider.region,
        access=provider.access or default_access,
        functions=functions,
        routes=routes,
        domain=resolve_custom_domain(spec.custom.custom_domain, routes),
    )
