from .axle_client import AxleClient

__all__ = ["AxleClient"]
