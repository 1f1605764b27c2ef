import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

from kubernetes.client import CoreV1Api, V1Namespace, V1Node, V1Pod
from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from cluster_info.core import (
    ClusterSnapshot,
    Identity,
    NamespaceEntry,
    NodeEntry,
    PodEntry,
    format_namespace,
    format_node,
    format_pod,
    render_namespace,
    render_node,
    render_pod,
)
from cluster_info.settings import Settings

logger = logging.getLogger(__name__)

# Failures that cost one section of a cycle, never the whole loop
QUERY_ERRORS = (ApiException, HTTPError)


def with_context(e: ApiException, message: str) -> ApiException:
    wrapped = ApiException(status=e.status, reason=f"{message}: {e.reason}")
    wrapped.body = e.body
    wrapped.headers = e.headers
    return wrapped


def list_nodes(api: CoreV1Api, identity: Identity) -> list[NodeEntry]:
    """
    List every node in the cluster.

    Args:
        api: Kubernetes CoreV1Api instance
        identity: Who we are, used to flag our own node

    Returns:
        One NodeEntry per node, in API order

    Raises:
        ApiException: If there's an error communicating with the Kubernetes API
    """
    try:
        nodes: list[V1Node] = api.list_node().items
    except ApiException as e:
        raise with_context(e, "Failed to list nodes") from e
    return [format_node(node, identity) for node in nodes]


def list_namespaces(api: CoreV1Api, identity: Identity) -> list[NamespaceEntry]:
    """
    List every namespace in the cluster.

    Raises:
        ApiException: If there's an error communicating with the Kubernetes API
    """
    try:
        namespaces: list[V1Namespace] = api.list_namespace().items
    except ApiException as e:
        raise with_context(e, "Failed to list namespaces") from e
    return [format_namespace(namespace, identity) for namespace in namespaces]


def list_pods(api: CoreV1Api, identity: Identity, namespace: str) -> list[PodEntry]:
    """
    List the pods of one namespace.

    Raises:
        ApiException: If there's an error communicating with the Kubernetes API
    """
    try:
        pods: list[V1Pod] = api.list_namespaced_pod(namespace=namespace).items
    except ApiException as e:
        raise with_context(e, f"Failed to list pods in namespace {namespace}") from e
    return [format_pod(pod, identity) for pod in pods]


def report_nodes(api: CoreV1Api, identity: Identity, color: bool, out: TextIO) -> list[NodeEntry] | None:
    try:
        entries = list_nodes(api, identity)
    except QUERY_ERRORS as e:
        logger.error(f"Error getting cluster info: {e}")
        return None

    print(f"Cluster has {len(entries)} nodes:", file=out)
    for entry in entries:
        print(render_node(entry, color), file=out)
    return entries


def report_namespaces(api: CoreV1Api, identity: Identity, color: bool, out: TextIO) -> list[NamespaceEntry] | None:
    try:
        entries = list_namespaces(api, identity)
    except QUERY_ERRORS as e:
        logger.error(f"Error listing namespaces: {e}")
        return None

    print(f"Found {len(entries)} namespaces:", file=out)
    for entry in entries:
        print(render_namespace(entry, color), file=out)
    return entries


def report_pods(
    api: CoreV1Api, identity: Identity, namespace: str, color: bool, out: TextIO
) -> list[PodEntry] | None:
    try:
        entries = list_pods(api, identity, namespace)
    except QUERY_ERRORS as e:
        logger.error(f"Error listing pods: {e}")
        return None

    print(f"Found {len(entries)} pods in namespace '{namespace}':", file=out)
    for entry in entries:
        print(render_pod(entry, color), file=out)
    return entries


def execute_reporting_cycle(
    api: CoreV1Api,
    identity: Identity,
    settings: Settings,
    out: TextIO | None = None,
) -> ClusterSnapshot:
    """
    Execute one polling cycle: nodes, namespaces, then pods, each printed as it arrives.

    A failed query is logged and its section skipped; the remaining sections still run.

    Args:
        api: Kubernetes CoreV1Api instance
        identity: Who we are, used for self highlighting
        settings: Runtime settings (target namespace, color)
        out: Stream to print to, stdout by default

    Returns:
        The snapshot gathered during this cycle
    """
    if out is None:
        out = sys.stdout
    ts = datetime.now(UTC)
    logger.info("=== Kubernetes API Information ===")

    nodes = report_nodes(api, identity, settings.color, out)
    print(file=out)
    namespaces = report_namespaces(api, identity, settings.color, out)
    print(file=out)
    pods = report_pods(api, identity, settings.target_namespace, settings.color, out)
    out.flush()

    logger.info("=== End of Information ===")
    return ClusterSnapshot(
        nodes=nodes, namespaces=namespaces, pods=pods, namespace=settings.target_namespace, ts=ts
    )
