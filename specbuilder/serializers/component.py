"""
Where: specbuilder/serializers/component.py
What: Render a ResolvedService as a list of Serverless Devs component projects.
Why: The component deploy flow takes one project/props descriptor per function.
"""

from typing import Any, Callable, Dict, List

from ..core.utils import lowercase_object_key
from ..models.resolved import (
    HTTP,
    LOG,
    MESSAGE_QUEUE,
    OBJECT_STORAGE,
    TIMER,
    ResolvedDomain,
    ResolvedFunction,
    ResolvedService,
    ResolvedTrigger,
)

COMPONENT_PROVIDER = "alibaba"


def _http_config(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "authType": c["auth_type"].lower(),
        "methods": c["methods"],
        "invocationRole": c["role"],
        "qualifier": c["qualifier"],
    }


def _timer_config(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "cronExpression": c["cron_expression"],
        "enable": c["enable"],
        "payload": c["payload"],
        "qualifier": c["qualifier"],
    }


def _log_config(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "sourceConfig": {"logstore": c["source_logstore"]},
        "jobConfig": {
            "maxRetryTime": c["max_retry_time"],
            "triggerInterval": c["trigger_interval"],
        },
        "logConfig": {"project": c["project"], "logstore": c["logstore"]},
        "enable": c["enable"],
        "invocationRole": c["role"],
        "qualifier": c["qualifier"],
    }


def _oss_config(c: Dict[str, Any]) -> Dict[str, Any]:
    # The component expects capitalized Prefix/Suffix under filter.key.
    return {
        "bucketName": c["bucket"],
        "events": c["events"],
        "filter": {"key": {"Prefix": c["prefix"], "Suffix": c["suffix"]}},
        "enable": c["enable"],
        "invocationRole": c["role"],
        "qualifier": c["qualifier"],
    }


def _mq_config(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "topicName": c["topic"],
        "notifyContentFormat": c["notify_content_format"],
        "notifyStrategy": c["notify_strategy"],
        "region": c["region"],
        "filterTag": c["filter_tag"],
        "invocationRole": c["role"],
        "qualifier": c["qualifier"],
    }


_TRIGGERS: Dict[str, tuple[str, Callable[[Dict[str, Any]], Dict[str, Any]]]] = {
    HTTP: ("http", _http_config),
    TIMER: ("timer", _timer_config),
    LOG: ("log", _log_config),
    OBJECT_STORAGE: ("oss", _oss_config),
    MESSAGE_QUEUE: ("mns_topic", _mq_config),
}


def render_trigger(trigger: ResolvedTrigger, function_key: str) -> Dict[str, Any]:
    trigger_type, build_config = _TRIGGERS[trigger.kind]
    return {
        "name": trigger.resolve_name(function_key, qualified=True),
        "type": trigger_type,
        "config": build_config(trigger.config),
    }


def render_service(service: ResolvedService) -> Dict[str, Any]:
    provider = service.provider
    return {
        "name": service.name,
        "description": service.description,
        "internetAccess": provider.internet_access,
        "role": provider.role,
        "logConfig": lowercase_object_key(provider.log_config),
        "vpcConfig": lowercase_object_key(provider.vpc_config),
        "nasConfig": lowercase_object_key(provider.nas_config),
        "tracingConfig": provider.tracing_config,
    }


def render_function(func: ResolvedFunction, service: ResolvedService) -> Dict[str, Any]:
    return {
        "name": func.name,
        "description": func.description,
        "handler": func.handler,
        "initializer": func.initializer,
        "initializationTimeout": func.init_timeout,
        "memorySize": func.memory_size,
        "runtime": func.runtime,
        "timeout": func.timeout,
        "codeUri": func.code_uri,
        "instanceConcurrency": func.concurrency,
        "environmentVariables": dict(func.environment),
        "asyncConfiguration": lowercase_object_key(service.provider.async_configuration),
    }


def render_domain(domain: ResolvedDomain) -> Dict[str, Any]:
    return {
        "domainName": domain.domain_name,
        "protocol": "HTTP",
        "routeConfigs": [
            {
                "path": route.path,
                "serviceName": route.service_name,
                "functionName": route.function_name,
                "methods": list(route.methods),
            }
            for route in domain.routes
        ],
    }


def render_projects(service: ResolvedService) -> List[Dict[str, Any]]:
    """
    Render one project descriptor per function (not yet pruned).

    The custom domain holds routes of every function, so it is attached once,
    to the last descriptor.
    """
    service_props = render_service(service)
    projects = []

    for func in service.functions:
        projects.append(
            {
                "project": {
                    "provider": COMPONENT_PROVIDER,
                    "access": service.access,
                    "projectName": service.name,
                },
                "props": {
                    "service": dict(service_props),
                    "region": service.region,
                    "function": render_function(func, service),
                    "triggers": [render_trigger(t, func.key) for t in func.triggers],
                    "customDomains": [],
                },
            }
        )

    if service.domain is not None and projects:
        projects[-1]["props"]["customDomains"].append(render_domain(service.domain))

    return projects
