from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from kubernetes.client import V1Namespace, V1Node, V1Pod

from .core_k8s import get_kubelet_version, get_name, get_namespace, get_phase, is_node_ready

COLOR_RESET = "\033[0m"
COLOR_YELLOW = "\033[33m"

NODE_SELF_MARKER = "<- MY NODE"
NAMESPACE_SELF_MARKER = "<- MY NAMESPACE"
POD_SELF_MARKER = "<- THIS IS ME!"


@dataclass(frozen=True)
class Identity:
    """
    Who this process is, as injected through the Downward API.

    Attributes:
        pod_name: Name of the pod we run in, or "" when unset
        pod_namespace: Namespace of that pod, or "" when unset
        node_name: Node the pod is scheduled on, or "" when unset
    """

    pod_name: str = ""
    pod_namespace: str = ""
    node_name: str = ""


def load_identity(environ: Mapping[str, str]) -> Identity:
    return Identity(
        pod_name=environ.get("POD_NAME", ""),
        pod_namespace=environ.get("POD_NAMESPACE", ""),
        node_name=environ.get("NODE_NAME", ""),
    )


@dataclass
class NodeEntry:
    name: str
    kubelet_version: str
    ready: bool
    is_self: bool

    @property
    def status(self) -> str:
        return "Ready" if self.ready else "NotReady"


@dataclass
class NamespaceEntry:
    name: str
    phase: str
    is_self: bool


@dataclass
class PodEntry:
    name: str
    namespace: str
    phase: str
    is_self: bool


@dataclass
class ClusterSnapshot:
    """One polling cycle's view of the cluster. A section is None when its query failed."""

    nodes: list[NodeEntry] | None
    namespaces: list[NamespaceEntry] | None
    pods: list[PodEntry] | None
    namespace: str
    ts: datetime


def format_node(node: V1Node, identity: Identity) -> NodeEntry:
    name = get_name(node)
    return NodeEntry(
        name=name,
        kubelet_version=get_kubelet_version(node),
        ready=is_node_ready(node),
        is_self=name == identity.node_name,
    )


def format_namespace(namespace: V1Namespace, identity: Identity) -> NamespaceEntry:
    name = get_name(namespace)
    return NamespaceEntry(name=name, phase=get_phase(namespace), is_self=name == identity.pod_namespace)


def format_pod(pod: V1Pod, identity: Identity) -> PodEntry:
    name = get_name(pod)
    namespace = get_namespace(pod)
    return PodEntry(
        name=name,
        namespace=namespace,
        phase=get_phase(pod),
        # Same-named pods in other namespaces are not us
        is_self=name == identity.pod_name and namespace == identity.pod_namespace,
    )


def highlight(line: str, marker: str, color: bool) -> str:
    line = f"{line} {marker}"
    return f"{COLOR_YELLOW}{line}{COLOR_RESET}" if color else line


def render_node(entry: NodeEntry, color: bool = True) -> str:
    line = f"- {entry.name} ({entry.kubelet_version}, {entry.status})"
    return highlight(line, NODE_SELF_MARKER, color) if entry.is_self else line


def render_namespace(entry: NamespaceEntry, color: bool = True) -> str:
    line = f"- {entry.name} (Phase: {entry.phase})"
    return highlight(line, NAMESPACE_SELF_MARKER, color) if entry.is_self else line


def render_pod(entry: PodEntry, color: bool = True) -> str:
    line = f"- {entry.name} (Phase: {entry.phase})"
    return highlight(line, POD_SELF_MARKER, color) if entry.is_self else line
