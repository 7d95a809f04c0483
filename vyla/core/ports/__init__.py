from vyla.core.ports.api_clients import IMetadataClient

__all__ = ["IMetadataClient"]
