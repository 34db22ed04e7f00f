"""Shared fixtures for kubeimg integration tests.

Two namespaces of a fictional shop, staging and production, served by an
in-memory retriever so the list / compare pipelines run without a cluster.
"""

from __future__ import annotations

import pytest

from kubeimg.render.document import Side
from tests.factories import FakeRetriever, make_cronjob, make_service, make_workload

STAGING = Side(context="kind-dev", namespace="shop-staging")
PRODUCTION = Side(context="prod-eu", namespace="shop")


def _objects() -> dict:
    staging = {
        "Deployment": [
            make_workload("api", ["ghcr.io/acme/api-server:v1.3.0", "envoyproxy/envoy:v1.29.0"]),
            make_workload("web", ["ghcr.io/acme/storefront:2.4.1"]),
        ],
        "StatefulSet": [make_workload("db", ["postgres:16.2"])],
        "CronJob": [make_cronjob("report", ["ghcr.io/acme/reporter:0.9"])],
        "Service": [make_service("web"), make_service("api"), make_service("preview")],
    }
    production = {
        "Deployment": [
            make_workload("api", ["ghcr.io/acme/api-server:v1.2.3", "envoyproxy/envoy:v1.29.0"]),
            make_workload("web", ["ghcr.io/acme/storefront:2.4.1"]),
        ],
        "StatefulSet": [make_workload("db", ["postgres:16.2"])],
        "DaemonSet": [make_workload("node-agent", ["datadog/agent:7"])],
        "Service": [make_service("api"), make_service("web")],
    }
    objects = {}
    for side, by_kind in ((STAGING, staging), (PRODUCTION, production)):
        for kind, items in by_kind.items():
            objects[(side.context, side.namespace, kind)] = items
    return objects


def make_shop_retriever(**kwargs) -> FakeRetriever:
    """Retriever serving both shop namespaces."""
    return FakeRetriever(
        objects=_objects(),
        namespaces={(STAGING.context, STAGING.namespace), (PRODUCTION.context, PRODUCTION.namespace)},
        **kwargs,
    )


@pytest.fixture()
def shop_retriever() -> FakeRetriever:
    return make_shop_retriever()
