"""Balanced binary search tree construction, mutation and inspection."""

from .builder import build_tree
from .config import ConfigError, DemoConfig, load_demo_config
from .node import Node
from .operations import NodeNotFoundError, Tree, TreeOperations, Visitor
from .rendering import pretty_print
from .sampling import random_keys

__all__ = [
    "ConfigError",
    "DemoConfig",
    "Node",
    "NodeNotFoundError",
    "Tree",
    "TreeOperations",
    "Visitor",
    "build_tree",
    "load_demo_config",
    "pretty_print",
    "random_keys",
]
