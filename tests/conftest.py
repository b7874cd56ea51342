"""Shared test fixtures for rjsconfig tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from rjsconfig.config import XmlReaderConfig


@pytest.fixture
def default_config() -> XmlReaderConfig:
    """Return a default XmlReaderConfig."""
    return XmlReaderConfig()


@pytest.fixture
def tmp_xml_file(tmp_path: Path):
    """Factory fixture to write XML string to a temp .xml file and return the path."""

    def _write(xml_content: str, filename: str = "config.xml") -> str:
        file_path = tmp_path / filename
        file_path.write_text(xml_content, encoding="utf-8")
        return str(file_path)

    return _write


@pytest.fixture
def sample_xml_minimal() -> str:
    """One rjs and one static dlsip inside two wrapper elements."""
    return (
        '<root><seg><rjs prejezd="P1" ip="10.0.0.1" port="5000" type="A"/>'
        '<dlsip source="STATIC" ip="10.0.0.2"/></seg></root>'
    )


@pytest.fixture
def sample_xml_interleaved() -> str:
    """Realistic document mixing both record kinds across sections."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<config>
    <network>
        <rjs prejezd="P1" ip="192.168.1.10" port="5000" type="AZD" />
        <dlsip source="HOSTS" alias="dls-a" connection="P2P" />
        <rjs prejezd="P2" ip="192.168.1.11" port="5001" type="PZZ" />
    </network>
    <diagnostics>
        <dlsip source="STATIC" ip="fd00::2" />
        <rjs prejezd="P3" ip="2001:db8::1" port="65535" type="AZD" />
        <dlsip source="HOSTS" alias="dls-b" connection="BROADCAST" />
    </diagnostics>
</config>"""
