"""
ROS template serializer.

Renders a ResolvedService as an Aliyun Serverless (ROS) template:

    ROSTemplateFormatVersion: '2015-09-01'
    Transform: 'Aliyun::Serverless-2018-04-03'
    Resources:
      <service>:
        Type: Aliyun::Serverless::Service
        <function>:
          Type: Aliyun::Serverless::Function
          Events: {<trigger name>: {...}}
      midway_auto_domain:
        Type: Aliyun::Serverless::CustomDomain
"""

from typing import Any, Callable, Dict, List

from ..core.utils import uppercase_object_key
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
    RouteEntry,
)

ROS_TEMPLATE_FORMAT_VERSION = "2015-09-01"
ROS_TRANSFORM = "Aliyun::Serverless-2018-04-03"
SERVICE_TYPE = "Aliyun::Serverless::Service"
FUNCTION_TYPE = "Aliyun::Serverless::Function"
CUSTOM_DOMAIN_TYPE = "Aliyun::Serverless::CustomDomain"
AUTO_DOMAIN_RESOURCE = "midway_auto_domain"


def _http_properties(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "AuthType": c["auth_type"],
        "Methods": c["methods"],
        "InvocationRole": c["role"],
        "Qualifier": c["qualifier"],
    }


def _timer_properties(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "CronExpression": c["cron_expression"],
        "Enable": c["enable"],
        "Payload": c["payload"],
        "Qualifier": c["qualifier"],
    }


def _log_properties(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "SourceConfig": {"Logstore": c["source_logstore"]},
        "JobConfig": {
            "MaxRetryTime": c["max_retry_time"],
            "TriggerInterval": c["trigger_interval"],
        },
        "LogConfig": {"Project": c["project"], "Logstore": c["logstore"]},
        "Enable": c["enable"],
        "InvocationRole": c["role"],
        "Qualifier": c["qualifier"],
    }


def _oss_properties(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "BucketName": c["bucket"],
        "Events": c["events"],
        "Filter": {"Key": {"Prefix": c["prefix"], "Suffix": c["suffix"]}},
        "Enable": c["enable"],
        "InvocationRole": c["role"],
        "Qualifier": c["qualifier"],
    }


def _mq_properties(c: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "TopicName": c["topic"],
        "NotifyContentFormat": c["notify_content_format"],
        "NotifyStrategy": c["notify_strategy"],
        "Region": c["region"],
        "FilterTag": c["filter_tag"],
        "InvocationRole": c["role"],
        "Qualifier": c["qualifier"],
    }


# kind -> (ROS trigger Type, properties builder)
_TRIGGERS: Dict[str, tuple[str, Callable[[Dict[str, Any]], Dict[str, Any]]]] = {
    HTTP: ("HTTP", _http_properties),
    TIMER: ("Timer", _timer_properties),
    LOG: ("Log", _log_properties),
    OBJECT_STORAGE: ("OSS", _oss_properties),
    MESSAGE_QUEUE: ("MNSTopic", _mq_properties),
}


def render_trigger(trigger: ResolvedTrigger) -> Dict[str, Any]:
    trigger_type, build_properties = _TRIGGERS[trigger.kind]
    return {"Type": trigger_type, "Properties": build_properties(trigger.config)}


def render_function(func: ResolvedFunction) -> Dict[str, Any]:
    """Function resource with its Events. Same-named triggers: last one wins."""
    events: Dict[str, Any] = {}
    for trigger in func.triggers:
        events[trigger.resolve_name(func.key, qualified=False)] = render_trigger(trigger)

    return {
        "Type": FUNCTION_TYPE,
        "Properties": {
            "Description": func.description,
            "Initializer": func.initializer,
            "Handler": func.handler,
            "Runtime": func.runtime,
            "CodeUri": func.code_uri,
            "Timeout": func.timeout,
            "InitializationTimeout": func.init_timeout,
            "MemorySize": func.memory_size,
            "EnvironmentVariables": dict(func.environment),
            "InstanceConcurrency": func.concurrency,
        },
        "Events": events,
    }


def render_routes(routes: List[RouteEntry]) -> Dict[str, Any]:
    """Route table keyed by path. A later route on the same path replaces the earlier one."""
    return {
        route.path: {"serviceName": route.service_name, "functionName": route.function_name}
        for route in routes
    }


def render_domain(domain: ResolvedDomain) -> tuple[str, Dict[str, Any]]:
    """Return (resource key, resource) for the custom domain."""
    properties: Dict[str, Any] = {}
    if domain.auto:
        properties["DomainName"] = "Auto"
    properties["Protocol"] = "HTTP"
    properties["RouteConfig"] = {"routes": render_routes(domain.routes)}

    key = AUTO_DOMAIN_RESOURCE if domain.auto else domain.domain_name
    return key, {"Type": CUSTOM_DOMAIN_TYPE, "Properties": properties}


def render_template(service: ResolvedService) -> Dict[str, Any]:
    """Render the full ROS template (not yet pruned)."""
    provider = service.provider
    service_resource: Dict[str, Any] = {
        "Type": SERVICE_TYPE,
        "Properties": {
            "Description": service.description,
            "Role": provider.role,
            "InternetAccess": provider.internet_access,
            "VpcConfig": uppercase_object_key(provider.vpc_config),
            "Policies": uppercase_object_key(provider.policies),
            "LogConfig": uppercase_object_key(provider.log_config),
            "NasConfig": uppercase_object_key(provider.nas_config),
            "AsyncConfiguration": uppercase_object_key(provider.async_configuration),
            "TracingConfig": provider.tracing_config,
        },
    }

    for func in service.functions:
        service_resource[func.name] = render_function(func)

    resources: Dict[str, Any] = {service.name: service_resource}
    if service.domain is not None:
        key, resource = render_domain(service.domain)
        resources[key] = resource

    return {
        "ROSTemplateFormatVersion": ROS_TEMPLATE_FORMAT_VERSION,
        "Transform": ROS_TRANSFORM,
        "Resources": resources,
    }
