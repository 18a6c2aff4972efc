class GeoDataError(Exception):
    """Base exception for GeoJSON loading failures"""
    pass

class HttpStatusError(GeoDataError):
    """Raised when the server answers with a non-success status"""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Fetch failed: {status_code} {reason}")

class ParseError(GeoDataError):
    """Raised when the response body is not valid JSON"""
    pass

class NetworkError(GeoDataError):
    """Raised when the request could not complete at all"""

    def __init__(self, url: str, detail: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {detail}")
