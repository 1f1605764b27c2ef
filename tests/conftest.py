from unittest.mock import Mock

import pytest
from kubernetes.client import (
    CoreV1Api,
    V1Namespace,
    V1NamespaceStatus,
    V1Node,
    V1NodeCondition,
    V1NodeStatus,
    V1NodeSystemInfo,
    V1ObjectMeta,
    V1Pod,
    V1PodStatus,
)

from cluster_info.core import Identity
from cluster_info.settings import Settings


def create_test_node(
    name: str,
    kubelet_version: str = "v1.28.3",
    conditions: list[tuple[str, str]] | None = None,
) -> V1Node:
    """Create a test node; conditions are (type, status) pairs, Ready/True by default."""
    if conditions is None:
        conditions = [("Ready", "True")]
    node = Mock(spec=V1Node)
    node.metadata = Mock(spec=V1ObjectMeta)
    node.metadata.name = name
    node.status = Mock(spec=V1NodeStatus)
    node.status.conditions = [V1NodeCondition(type=type_, status=status) for type_, status in conditions]
    node.status.node_info = Mock(spec=V1NodeSystemInfo)
    node.status.node_info.kubelet_version = kubelet_version
    return node


def create_test_namespace(name: str, phase: str = "Active") -> V1Namespace:
    return V1Namespace(metadata=V1ObjectMeta(name=name), status=V1NamespaceStatus(phase=phase))


def create_test_pod(name: str, namespace: str = "default", phase: str = "Running") -> V1Pod:
    return V1Pod(metadata=V1ObjectMeta(name=name, namespace=namespace), status=V1PodStatus(phase=phase))


def create_test_api(
    nodes: list[V1Node] | None = None,
    namespaces: list[V1Namespace] | None = None,
    pods: list[V1Pod] | None = None,
) -> CoreV1Api:
    """Create a CoreV1Api mock whose list calls return the given objects."""
    api = Mock(spec=CoreV1Api)
    api.list_node.return_value = Mock(items=nodes or [])
    api.list_namespace.return_value = Mock(items=namespaces or [])
    api.list_namespaced_pod.return_value = Mock(items=pods or [])
    return api


@pytest.fixture
def identity() -> Identity:
    return Identity(pod_name="reporter-7d9f", pod_namespace="monitoring", node_name="node-b")


@pytest.fixture
def settings() -> Settings:
    return Settings(target_namespace="monitoring", poll_interval=30.0, color=True)
