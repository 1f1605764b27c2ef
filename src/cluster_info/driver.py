import logging
import os
import sys
import time
from collections.abc import Callable

from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from cluster_info.api_components import execute_reporting_cycle
from cluster_info.core import Identity, load_identity
from cluster_info.log import setup_logger
from cluster_info.settings import Settings, SettingsError

logger = logging.getLogger(__name__)


def connect() -> client.CoreV1Api:
    """
    Build a CoreV1Api from the service account credentials mounted into the pod.

    Raises:
        ConfigException: If we are not running inside a cluster
    """
    config.load_incluster_config()
    return client.CoreV1Api()


def run(
    api: client.CoreV1Api,
    identity: Identity,
    settings: Settings,
    sleep: Callable[[float], None] = time.sleep,
    max_cycles: int | None = None,
) -> int:
    """
    Poll the cluster every settings.poll_interval seconds.

    Runs forever unless max_cycles is given. Returns the number of cycles executed.
    """
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        execute_reporting_cycle(api, identity, settings)
        cycles += 1
        logger.info(f"Waiting {settings.poll_interval:g} seconds before next update...")
        sleep(settings.poll_interval)
    return cycles


def main():
    """
    Report nodes, namespaces and pods forever, highlighting the pod we run in.
    """
    try:
        settings = Settings.from_env(os.environ)
    except SettingsError as e:
        setup_logger(os.environ.get("LOG_LEVEL", "INFO"))
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logger(settings.log_level)
    logger.info("Starting Kubernetes API client...")

    identity = load_identity(os.environ)

    try:
        api = connect()
    except ConfigException as e:
        logger.critical(f"Failed to create Kubernetes client: {e}")
        sys.exit(1)

    logger.info("Pod metadata from Downward API:")
    logger.info(f"  Pod Name: {identity.pod_name}")
    logger.info(f"  Pod Namespace: {identity.pod_namespace}")
    logger.info(f"  Node Name: {identity.node_name}")

    try:
        run(api, identity, settings)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        sys.exit(0)


if __name__ == "__main__":
    main()
