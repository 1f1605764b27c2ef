"""Cluster info reporter package."""

from .api_components import execute_reporting_cycle
from .core import ClusterSnapshot, Identity

__all__ = ["ClusterSnapshot", "Identity", "execute_reporting_cycle"]
