import logging

from specbuilder.builder import FCComponentSpecBuilder
from specbuilder.core.domain import AUTO_DOMAIN_NOTICE

SPEC = {
    "service": {"name": "svc", "description": "demo"},
    "provider": {
        "region": "cn-hangzhou",
        "access": "prod",
        "role": "acs:ram::123:role/fc",
        "logConfig": {"Project": "p", "Logstore": "l"},
        "asyncConfiguration": {"MaxAsyncRetryAttempts": 1},
    },
    "custom": {"customDomain": {"domainName": "auto"}},
    "functions": {
        "index": {
            "memorySize": 256,
            "events": [{"http": {"path": "/api/*", "method": "get"}}],
        },
        "worker": {
            "handler": "worker.run",
            "events": [
                {"http": {"path": "/worker"}},
                {"timer": {"type": "every", "value": "1h"}},
                {"log": {"source": "src"}},
                {"os": {"bucket": "assets", "events": ["oss:ObjectCreated:*"], "filter": {"suffix": ".jpg"}}},
                {"mq": {"topic": "orders"}},
            ],
        },
    },
}


def _build(data, **kwargs):
    return FCComponentSpecBuilder(data, **kwargs).to_json()


class TestComponentProjects:
    """Tests for the component project list."""

    def test_one_project_per_function(self):
        projects = _build(SPEC)

        assert len(projects) == 2
        assert [p["props"]["function"]["name"] for p in projects] == ["index", "worker"]

    def test_project_block(self):
        (first, _) = _build(SPEC)

        assert first["project"] == {"provider": "alibaba", "access": "prod", "projectName": "svc"}
        assert first["props"]["region"] == "cn-hangzhou"

    def test_service_block(self):
        (first, _) = _build(SPEC)

        assert first["props"]["service"] == {
            "name": "svc",
            "description": "demo",
            "role": "acs:ram::123:role/fc",
            "logConfig": {"project": "p", "logstore": "l"},
        }

    def test_function_block(self):
        (first, second) = _build(SPEC, user_env={"NODE_ENV": "test"})

        assert first["props"]["function"] == {
            "name": "index",
            "description": "",
            "handler": "index.handler",
            "initializer": "index.initializer",
            "initializationTimeout": 3,
            "memorySize": 256,
            "runtime": "nodejs14",
            "timeout": 3,
            "codeUri": ".",
            "instanceConcurrency": 1,
            "environmentVariables": {"NODE_ENV": "test"},
            "asyncConfiguration": {"maxAsyncRetryAttempts": 1},
        }
        assert second["props"]["function"]["initializer"] == "worker.initializer"

    def test_http_trigger(self):
        (first, _) = _build(SPEC)

        assert first["props"]["triggers"] == [
            {
                "name": "http-index",
                "type": "http",
                "config": {"authType": "anonymous", "methods": ["GET"]},
            }
        ]

    def test_other_triggers_use_qualified_names(self):
        (_, second) = _build(SPEC)
        triggers = second["props"]["triggers"]

        assert [t["name"] for t in triggers] == [
            "http-worker",
            "timer-worker",
            "log-worker",
            "oss-worker",
            "mq-worker",
        ]
        assert [t["type"] for t in triggers] == ["http", "timer", "log", "oss", "mns_topic"]
        assert triggers[1]["config"] == {"cronExpression": "@every 1h", "enable": True}
        assert triggers[2]["config"] == {
            "sourceConfig": {"logstore": "src"},
            "jobConfig": {"maxRetryTime": 1, "triggerInterval": 30},
            "enable": True,
        }
        assert triggers[3]["config"] == {
            "bucketName": "assets",
            "events": ["oss:ObjectCreated:*"],
            "filter": {"key": {"Suffix": ".jpg"}},
            "enable": True,
        }
        assert triggers[4]["config"] == {
            "topicName": "orders",
            "notifyContentFormat": "JSON",
            "notifyStrategy": "BACKOFF_RETRY",
        }


class TestComponentCustomDomain:
    """Tests for customDomains in the component variant."""

    def test_domain_attached_once_to_last_project(self):
        (first, second) = _build(SPEC)

        assert "customDomains" not in first["props"]
        assert second["props"]["customDomains"] == [
            {
                "domainName": "auto",
                "protocol": "HTTP",
                "routeConfigs": [
                    {
                        "path": "/api/*",
                        "serviceName": "svc",
                        "functionName": "index",
                        "methods": ["GET"],
                    },
                    {
                        "path": "/worker",
                        "serviceName": "svc",
                        "functionName": "worker",
                        "methods": ["GET", "PUT", "POST", "DELETE", "HEAD", "PATCH"],
                    },
                ],
            }
        ]

    def test_named_domain(self):
        data = {**SPEC, "custom": {"customDomain": {"domainName": "api.example.com"}}}
        (_, second) = _build(data)

        assert second["props"]["customDomains"][0]["domainName"] == "api.example.com"

    def test_absent_domain_logs_notice_once(self, caplog):
        data = {key: value for key, value in SPEC.items() if key != "custom"}
        with caplog.at_level(logging.WARNING):
            (_, second) = _build(data)

        assert second["props"]["customDomains"][0]["domainName"] == "auto"
        assert caplog.messages.count(AUTO_DOMAIN_NOTICE) == 1

    def test_false_domain(self, caplog):
        data = {**SPEC, "custom": {"customDomain": False}}
        with caplog.at_level(logging.WARNING):
            projects = _build(data)

        assert all("customDomains" not in p["props"] for p in projects)
        assert AUTO_DOMAIN_NOTICE not in caplog.messages


def test_no_functions_yields_empty_list():
    assert _build({"service": "svc"}) == []
