from primecache.infra.http.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
