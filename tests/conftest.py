from __future__ import annotations

import pytest


RSS_DOCUMENT = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example World News</title>
    <link>https://news.example.com/</link>
    <description>Top headlines</description>
    <item>
      <title>Local council approves new budget plan</title>
      <link>https://news.example.com/budget</link>
      <description>&lt;p&gt;Councillors voted &lt;b&gt;7-2&lt;/b&gt; in favour.&lt;/p&gt;</description>
    </item>
    <item>
      <title>Storm causes flooding across southern coast</title>
      <link>https://news.example.com/storm</link>
    </item>
    <item>
      <link>https://news.example.com/untitled</link>
      <description>An entry without a title</description>
    </item>
  </channel>
</rss>
"""

ATOM_DOCUMENT = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Atom Feed</title>
  <id>urn:uuid:feed</id>
  <updated>2026-10-19T08:00:00Z</updated>
  <entry>
    <title>Central bank holds interest rates steady</title>
    <id>urn:uuid:entry-1</id>
    <updated>2026-10-19T08:00:00Z</updated>
    <summary>Policy makers left rates unchanged.</summary>
  </entry>
  <entry>
    <title>Museum reopens after lengthy renovation</title>
    <id>urn:uuid:entry-2</id>
    <updated>2026-10-19T07:00:00Z</updated>
    <content type="html">&lt;p&gt;Full content of the museum story&lt;/p&gt;</content>
  </entry>
</feed>
"""


def rss_with_titles(*titles: str) -> bytes:
    items = "".join(f"<item><title>{title}</title></item>" for title in titles)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Feed</title>'
        "<link>https://feed.example.com/</link><description>d</description>"
        f"{items}</channel></rss>"
    ).encode("utf-8")


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    monkeypatch.delenv("HEADLINE_TICKER_CONFIG", raising=False)


@pytest.fixture
def rss_factory():
    return rss_with_titles


@pytest.fixture
def rss_document() -> bytes:
    return RSS_DOCUMENT


@pytest.fixture
def atom_document() -> bytes:
    return ATOM_DOCUMENT
