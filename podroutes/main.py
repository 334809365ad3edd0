from fastapi import FastAPI

# Routers
from podroutes.api.routers.core import router as core_router
from podroutes.api.routers.feed import router as feed_router
from podroutes.api.routers.browse import router as browse_router


app = FastAPI(title="podroutes", version="0.1")

# Register routers (paths preserved as defined in each module)
app.include_router(core_router)
app.include_router(feed_router)
app.include_router(browse_router)
