import asyncio

import httpx

from gdp_graph.services.chart_service import ChartService
from gdp_graph.services.fetcher import GDPFetcher

URL = "https://example.test/GDP-data.json"
PAYLOAD = {"data": [["2015-01-01", 50], ["2015-04-01", 75]]}


def make_service(seen):
    service = None

    def handler(request):
        # nothing is rendered while the response is still in flight
        seen.append(service.ready)
        return httpx.Response(200, json=PAYLOAD)

    transport = httpx.MockTransport(handler)
    service = ChartService(fetcher=GDPFetcher(URL, transport=transport, async_transport=transport))
    return service


def test_load_renders_after_fetch():
    seen = []
    service = make_service(seen)
    assert not service.ready

    surface = service.load()
    assert seen == [False]
    assert service.ready
    assert len(surface.bars) == 2
    assert len(service.dataset) == 2


def test_load_async_renders_after_fetch():
    seen = []
    service = make_service(seen)

    surface = asyncio.run(service.load_async())
    assert seen == [False]
    assert service.ready
    assert [b.get("data-date") for b in surface.bars] == ["2015-01-01", "2015-04-01"]
