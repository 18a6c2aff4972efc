from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .routers import pages, api
from .utils.config import settings

from megacities.utils.logging import get_logger


# Create a logger specific to this module
logger = get_logger("megacities.main")

app = FastAPI(
    title="MegaCities viewer",
    version="1.0.0",
    openapi_url="/openapi.json"
)


@app.on_event("startup")
async def startup_event():
    logger.info("Starting application...")
    logger.info(f"Page origin {settings.page_origin}, GeoJSON path {settings.geojson_path}")
    logger.info(f"Serving data files from {settings.data_dir}")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutting down")

# Health check endpoint
@app.get("/health")
async def health_check():
    return JSONResponse(status_code=200, content={"status": "ok"})


app.include_router(pages.router)
app.include_router(api.router)
app.mount("/data", StaticFiles(directory=settings.data_dir, check_dir=False), name="data")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("megacities.main:app", host="0.0.0.0", port=8000)
