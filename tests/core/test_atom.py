from datetime import date
from xml.etree import ElementTree as ET

from postpress.core.atom import format_datetime, posts_to_xml_string

NS = {"atom": "http://www.w3.org/2005/Atom"}


def test_format_datetime_is_midnight_utc():
    assert format_datetime(date(2023, 1, 5)) == "2023-01-05T00:00:00Z"


def test_feed_contains_one_entry_per_post_in_order(config, make_post):
    posts = [
        make_post(title="Newer", slug="newer", permalink="/newer/", date=date(2023, 2, 1)),
        make_post(title="Older", slug="older", permalink="/older/", date=date(2023, 1, 1)),
    ]

    root = ET.fromstring(posts_to_xml_string(posts, config))

    assert root.tag == "{http://www.w3.org/2005/Atom}feed"
    assert root.findtext("atom:title", namespaces=NS) == "Test Blog"
    assert root.findtext("atom:updated", namespaces=NS) == "2023-02-01T00:00:00Z"
    entries = root.findall("atom:entry", NS)
    assert [e.findtext("atom:title", namespaces=NS) for e in entries] == ["Newer", "Older"]
    assert entries[0].findtext("atom:id", namespaces=NS) == "https://blog.example.org/newer/"
    assert entries[0].find("atom:link", NS).get("href") == "https://blog.example.org/newer/"


def test_feed_entry_authors_summary_and_content(config, make_post):
    post = make_post(authors=["Adrien Zinger", "Yvan Sraka"], description="Short", body="Some *text*")

    root = ET.fromstring(posts_to_xml_string([post], config))
    entry = root.find("atom:entry", NS)

    names = [a.findtext("atom:name", namespaces=NS) for a in entry.findall("atom:author", NS)]
    assert names == ["Adrien Zinger", "Yvan Sraka"]
    assert entry.findtext("atom:summary", namespaces=NS) == "Short"
    assert entry.findtext("atom:content", namespaces=NS) == "<p>Some <em>text</em></p>"


def test_feed_author_and_no_summary(config, make_post):
    config.feed.author = "Blog Team"

    root = ET.fromstring(posts_to_xml_string([make_post(description="")], config))

    assert root.findtext("atom:author/atom:name", namespaces=NS) == "Blog Team"
    assert root.find("atom:entry/atom:summary", NS) is None


def test_empty_feed_is_valid(config):
    root = ET.fromstring(posts_to_xml_string([], config))

    assert root.findall("atom:entry", NS) == []
    assert root.findtext("atom:updated", namespaces=NS) == "1970-01-01T00:00:00Z"


def test_empty_feed_is_deterministic(config):
    assert posts_to_xml_string([], config) == posts_to_xml_string([], config)
