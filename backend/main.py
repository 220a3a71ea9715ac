import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.calculate_routes import router as calculate_router
from api.credits_routes import router as credits_router
from api.emissions_routes import router as emissions_router
from api.health import router as health_router
from api.modes_routes import router as modes_router
from api.places_routes import router as places_router
from config import check_display_settings, settings
from services.emissions.emissions_factory import get_calculator
from services.routes.routes_factory import get_route_table

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("co2calc")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast on bad settings and warm the caches
    get_calculator()
    check_display_settings(settings)
    table = get_route_table(settings.routes_path)
    logger.info("Carbon calculator ready: %d routes (%s)", len(table), table.name)
    yield


app = FastAPI(title="CO2 Emissions Calculator", lifespan=lifespan)

# CORS (adjust for your frontend)
origins = settings.CORS_ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(health_router)
app.include_router(places_router)
app.include_router(modes_router)
app.include_router(emissions_router)
app.include_router(credits_router)
app.include_router(calculate_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
