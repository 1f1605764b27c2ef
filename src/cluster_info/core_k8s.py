from kubernetes.client import V1Namespace, V1Node, V1Pod

READY_CONDITION = "Ready"
CONDITION_TRUE = "True"


def is_node_ready(node: V1Node) -> bool:
    # First Ready/True condition wins; list order decides for malformed nodes
    if not node.status or not node.status.conditions:
        return False
    for condition in node.status.conditions:
        if condition.type == READY_CONDITION and condition.status == CONDITION_TRUE:
            return True
    return False


def get_kubelet_version(node: V1Node) -> str:
    if not node.status or not node.status.node_info:
        return ""
    return node.status.node_info.kubelet_version or ""


def get_name(obj: V1Node | V1Namespace | V1Pod) -> str:
    return obj.metadata.name if obj.metadata and obj.metadata.name else ""


def get_namespace(pod: V1Pod) -> str:
    return pod.metadata.namespace if pod.metadata and pod.metadata.namespace else ""


def get_phase(obj: V1Namespace | V1Pod) -> str:
    return obj.status.phase if obj.status and obj.status.phase else ""
