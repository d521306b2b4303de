"""Output sinks."""

from postpress.infra.sinks.atom import AtomFeedSink
from postpress.infra.sinks.html import HtmlSiteSink

__all__ = ["AtomFeedSink", "HtmlSiteSink"]
