import pytest

from dispensers.data_sources import DataSource, DataSourceError, SourceData
from dispensers.pipeline import Pipeline
from dispensers.transformers.base import Transformer

class StaticSource(DataSource):
    def __init__(self, config: dict):
        self.config = config
        self.extents = []
        self.closed = False

    async def fetch_data(self, extent=None) -> SourceData:
        self.extents.append(extent)
        if self.config.get('fail'):
            raise DataSourceError("unreachable")
        return SourceData(data={'features': [1, 2, 3]}, metadata={'feature_count': 3})

    def get_metadata(self):
        return self.config

    async def close(self):
        self.closed = True

class CountFeatures(Transformer):
    def transform(self, data):
        return len(data['features'])

async def test_execute_applies_transformers():
    source = StaticSource({})
    result = await Pipeline(source, [CountFeatures()]).execute(extent=(0, 0, 1, 1))

    assert result == 3
    assert source.extents == [(0, 0, 1, 1)]
    assert source.closed

async def test_execute_without_transformers_returns_raw_data():
    assert await Pipeline(StaticSource({})).execute() == {'features': [1, 2, 3]}

async def test_execute_propagates_errors():
    source = StaticSource({'fail': True})
    with pytest.raises(DataSourceError):
        await Pipeline(source, [CountFeatures()]).execute()
    assert source.closed

def test_transformer_name():
    assert str(CountFeatures()) == "CountFeatures"
