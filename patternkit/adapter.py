"""Adapting an XML data provider to a JSON reporting interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Reports(ABC):
    """Interface that turns raw data into a JSON report."""

    @abstractmethod
    def json_data(self, data: str) -> str:
        """Return a JSON representation of ``data``."""


class XmlDataProvider:
    """Produces XML from raw ``name:id`` data."""

    def xml_data(self, data: str) -> str:
        name, sep, ident = data.partition(":")
        if not sep:
            # Without a separator the whole input serves as both fields.
            ident = data
        return f"<user><name>{name}</name><id>{ident}</id></user>"


class XmlDataProviderAdapter(Reports):
    """Presents an :class:`XmlDataProvider` as a :class:`Reports`."""

    def __init__(self, provider: XmlDataProvider) -> None:
        self._provider = provider

    @staticmethod
    def _between(xml: str, open_tag: str, close_tag: str) -> str:
        start = xml.find(open_tag) + len(open_tag)
        end = xml.find(close_tag)
        return xml[start:end]

    def json_data(self, data: str) -> str:
        xml = self._provider.xml_data(data)
        name = self._between(xml, "<name>", "</name>")
        ident = self._between(xml, "<id>", "</id>")
        return '{"name":"' + name + '", "id":' + ident + "}"


class Client:
    """Consumer that only knows about :class:`Reports`."""

    def get_report(self, report: Reports, raw_data: str) -> str:
        """Print and return the JSON produced by ``report``."""
        result = report.json_data(raw_data)
        print(f"Processed JSON: {result}")
        return result


def main(argv: list[str] | None = None) -> int:
    """Print the JSON report for a sample record."""
    del argv
    adapter = XmlDataProviderAdapter(XmlDataProvider())
    Client().get_report(adapter, "Alice:42")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())