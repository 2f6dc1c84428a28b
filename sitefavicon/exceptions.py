"""sitefavicon specific exceptions."""


class FaviconError(Exception):
    """Base class for failures the pipeline recovers from on its own."""


class FetchError(FaviconError):
    """Raised when a homepage or candidate request does not yield a body."""

    url: str

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class FetchTimeout(FetchError):
    """Raised when a request exceeds its deadline."""

    timeout_ms: int

    def __init__(self, url: str, timeout_ms: int) -> None:
        super().__init__(url, f"Request to {url} timed out after {timeout_ms}ms")
        self.timeout_ms = timeout_ms


class FetchFailed(FetchError):
    """Raised for a non-2xx response, or a transport error when `status_code` is None."""

    status_code: int | None

    def __init__(self, url: str, status_code: int | None, reason: str = "") -> None:
        if status_code is not None:
            message = f"Request to {url} failed with status {status_code}"
        else:
            message = f"Request to {url} failed: {reason}"
        super().__init__(url, message)
        self.status_code = status_code


class ResolutionFailed(FaviconError):
    """Raised when an icon href cannot be resolved to an absolute http(s) URL."""

    pass


class DecodeFailed(FaviconError):
    """Raised when source bytes cannot be decoded as an image."""

    pass


class AssetStoreError(Exception):
    """Raised when the asset store cannot be built or a write is rejected."""

    pass
