from .base import ResourceProxy, ResourceState, do_collection_request

__all__ = ["ResourceProxy", "ResourceState", "do_collection_request"]
