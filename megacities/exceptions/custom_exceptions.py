from fastapi import HTTPException

class GeoDataUnavailableError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(
            status_code=502,
            detail=f"GeoJSON unavailable: {detail}"
        )

class NotAFeatureCollectionError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(
            status_code=422,
            detail=f"GeoJSON is not a FeatureCollection: {detail}"
        )
