"""Store readers: cursor primitives and metadata lookups per store type."""

from . import etcd, mongodb, redis
from ._utils import filter_names, match_patterns

__all__ = ["etcd", "mongodb", "redis", "filter_names", "match_patterns"]
