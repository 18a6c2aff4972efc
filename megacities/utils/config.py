from pydantic_settings import BaseSettings
from typing import Optional
import os

class Settings(BaseSettings):

    ## Where the page is "loaded from". The GeoJSON path is resolved against it,
    ## so a file:// origin reproduces the blocked-fetch case the loader hints about
    page_origin: str = "http://localhost:8000/"
    geojson_path: str = "data/MegaCities.geojson"

    ## Directory served under /data
    data_dir: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "data"))

    ## id of the page element both tables are appended to
    container_id: str = "mydiv"
    page_title: str = "MegaCities"

    ## None leaves timeouts to the network layer
    fetch_timeout: Optional[float] = None

    log_dir: str = "./logs"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
