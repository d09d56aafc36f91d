"""Tests for fetching topics and news resources."""

from datetime import datetime, timezone

import pytest

from news_sync import NewsResource, Topic
from tests.fakes import news_json, topic_json


@pytest.mark.asyncio
async def test_fetch_topics_without_ids_fetches_all(source, server):
    server.topics = [topic_json("1"), topic_json("2")]

    topics = await source.fetch_topics()

    assert [t.id for t in topics] == ["1", "2"]
    assert len(server.requests) == 1
    request = server.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/api/topics"
    assert "id" not in request.url.params


@pytest.mark.asyncio
async def test_fetch_topics_sends_repeated_id_params(source, server):
    server.topics = [topic_json("3"), topic_json("5"), topic_json("7")]

    topics = await source.fetch_topics(["3", "7"])

    assert [t.id for t in topics] == ["3", "7"]
    assert len(server.requests) == 1
    assert server.requests[0].url.params.get_list("id") == ["3", "7"]


@pytest.mark.asyncio
async def test_fetch_topics_decodes_fields(source, server):
    server.topics = [topic_json("1", name="Headlines")]

    (topic,) = await source.fetch_topics()

    assert topic == Topic(
        id="1",
        name="Headlines",
        short_description="short",
        long_description="long",
        url="https://example.test/t/1",
        image_url="https://example.test/t/1.svg",
        followed=False,
    )


@pytest.mark.asyncio
async def test_server_order_is_preserved(source, server):
    server.topics = [topic_json("9"), topic_json("1"), topic_json("4")]

    topics = await source.fetch_topics()

    assert [t.id for t in topics] == ["9", "1", "4"]


@pytest.mark.asyncio
async def test_missing_ids_are_not_an_error(source, server):
    server.news_resources = [news_json("a")]

    resources = await source.fetch_news_resources(["a", "b"])

    assert [r.id for r in resources] == ["a"]
    assert server.requests[0].url.path == "/api/newsresources"
    assert server.requests[0].url.params.get_list("id") == ["a", "b"]


@pytest.mark.asyncio
async def test_fetch_news_resources_decodes_fields(source, server):
    server.news_resources = [news_json("a", topics=("1", "2"))]

    (resource,) = await source.fetch_news_resources()

    assert isinstance(resource, NewsResource)
    assert resource.title == "News a"
    assert resource.type == "Article"
    assert resource.topics == ("1", "2")
    assert resource.header_image_url == "https://example.test/n/a.png"
    assert resource.publish_date == datetime(2022, 10, 6, 23, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_empty_data_returns_empty_list(source, server):
    assert await source.fetch_news_resources() == []


@pytest.mark.asyncio
async def test_single_string_ids_rejected_before_request(source, server):
    with pytest.raises(TypeError):
        await source.fetch_topics("abc")
    assert server.requests == []


@pytest.mark.asyncio
async def test_empty_ids_is_the_fetch_all_request(source, server):
    server.topics = [topic_json("1"), topic_json("2")]
    server.news_resources = [news_json("a")]

    topics = await source.fetch_topics([])
    resources = await source.fetch_news_resources(set())

    assert [t.id for t in topics] == ["1", "2"]
    assert [r.id for r in resources] == ["a"]
    assert len(server.requests) == 2
    for request in server.requests:
        assert "id" not in request.url.params
