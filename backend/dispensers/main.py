from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
import logging
from datetime import datetime

from dispensers.config.sources import SOURCES, get_dispenser_config
from dispensers.services import WFSService
from dispensers.transformers.geojson import DispensersToGeoDataFrame

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Water Dispenser API",
    description="API serving water dispenser locations from a WFS endpoint",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def get_service() -> WFSService:
    return WFSService.from_config(get_dispenser_config(), logger=logger)

@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }

@app.get("/api/sources")
async def list_sources():
    """List all available data sources"""
    return {
        source_id: {
            "name": config.name,
            "type": config.type,
            "description": config.description,
            "enabled": config.enabled
        }
        for source_id, config in SOURCES.items()
        if config.enabled
    }

@app.get("/api/dispensers")
async def get_dispensers():
    """Get all water dispensers"""
    result = await get_service().fetch_result()
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)
    
    return [dispenser.model_dump(by_alias=True, mode="json") for dispenser in result.dispensers]

@app.get("/api/dispensers/source")
async def get_dispenser_source():
    """Vector source descriptor for extent-driven map loading"""
    return get_service().create_vector_source().as_dict()

@app.get("/api/dispensers.geojson")
async def get_dispensers_geojson(web_mercator: bool = False):
    """Dispensers as a GeoJSON point layer (EPSG:4326, or EPSG:3857 with web_mercator)"""
    result = await get_service().fetch_result()
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)

    gdf = DispensersToGeoDataFrame(to_web_mercator=web_mercator).transform(result.dispensers)
    return Response(content=gdf.to_json(), media_type="application/geo+json")
