import pytest

from akamai_purge_tools.errors import InvalidCpCodeError, MalformedUrlError, ValidationError
from akamai_purge_tools.models.purge_item import PurgeUrl, parse_cpcodes, parse_tags, parse_urls


def test_parse_url():
    url = PurgeUrl.parse("https://www.example.com/a//b/c.html?x=1")

    assert url.host == "www.example.com"
    assert url.path == "/a//b/c.html"
    assert url.segments == ["a", "b", "c.html"]
    assert str(url) == "https://www.example.com/a//b/c.html?x=1"


@pytest.mark.parametrize(
    "value",
    [
        "not a url",
        "www.example.com/a",
        "https://",
        "",
        "http://[::1",
        # Bad ports
        "https://example.com:abc/a",
        "https://example.com:99999/a",
    ],
)
def test_parse_url_malformed(value):
    with pytest.raises(MalformedUrlError):
        PurgeUrl.parse(value)


def test_parse_urls_keeps_order():
    urls = parse_urls(["https://b.example/2", "https://a.example/1"])
    assert [url.host for url in urls] == ["b.example", "a.example"]


def test_parse_urls_all_or_nothing():
    with pytest.raises(ValidationError):
        parse_urls(["https://example.com/ok", "nope", "https://example.com/fine"])


def test_parse_tags():
    assert parse_tags(["promo", "", "home"]) == ["promo", "home"]


def test_parse_cpcodes():
    assert parse_cpcodes(["123", "456", "+7", "-8"]) == [123, 456, 7, -8]


@pytest.mark.parametrize(
    "values",
    [["123", "abc"], ["1.5"], [""], ["12_34"], [" 12 "], ["0x1F"]],
)
def test_parse_cpcodes_invalid(values):
    with pytest.raises(InvalidCpCodeError):
        parse_cpcodes(values)
