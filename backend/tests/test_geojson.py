import pytest

from dispensers.transformers.dispensers import GeoJSONToDispensers
from dispensers.transformers.geojson import DispensersToGeoDataFrame

@pytest.fixture
def dispensers(feature_collection):
    return GeoJSONToDispensers().transform(feature_collection)

def test_one_point_per_dispenser(dispensers):
    gdf = DispensersToGeoDataFrame().transform(dispensers)

    assert len(gdf) == 3
    assert gdf.crs.to_epsg() == 4326
    assert list(gdf['id']) == ["dispensers.1", "dispenser-1", "17"]
    assert list(gdf['water_type']) == ["sparkling", "still", "filtered"]
    assert gdf.geometry.iloc[0].x == pytest.approx(4.8952)
    assert gdf.geometry.iloc[0].y == pytest.approx(52.3702)

def test_web_mercator(dispensers):
    gdf = DispensersToGeoDataFrame(to_web_mercator=True).transform(dispensers)

    assert gdf.crs.to_epsg() == 3857
    assert gdf.geometry.iloc[0].x == pytest.approx(544930.0, abs=100)

def test_empty():
    gdf = DispensersToGeoDataFrame().transform([])
    assert len(gdf) == 0
    assert 'name' in gdf.columns
