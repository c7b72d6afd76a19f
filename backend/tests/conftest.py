import copy

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

FEATURE_COLLECTION = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "id": "dispensers.1",
            "geometry": {"type": "Point", "coordinates": [4.8952, 52.3702]},
            "properties": {
                "name": "Dam Square Tap",
                "water_types": "sparkling,still",
                "is_indoor": False,
                "address": "Dam 1, Amsterdam",
                "description": "Next to the monument",
            },
        },
        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [4.9041, 52.3676]},
            "properties": {"is_indoor": True},
        },
        {
            "type": "Feature",
            "id": 17,
            "geometry": {"type": "Point", "coordinates": [5.1214, 52.0907]},
            "properties": {"name": "Utrecht Centraal", "water_types": "filtered"},
        },
    ],
}

@pytest.fixture
def feature_collection():
    return copy.deepcopy(FEATURE_COLLECTION)

@pytest.fixture
async def wfs_server():
    """Start local WFS stand-ins; returns the endpoint URL for a given handler"""
    servers = []

    async def start(handler):
        app = web.Application()
        app.router.add_get('/wfs', handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return str(server.make_url('/wfs'))

    yield start

    for server in servers:
        await server.close()

@pytest.fixture
def geojson_handler(feature_collection):
    """Handler serving the sample collection and recording request queries"""
    requests = []

    async def handler(request):
        requests.append(dict(request.query))
        return web.json_response(feature_collection)

    handler.requests = requests
    return handler
