"""Pytest configuration and shared fixtures for the diskkit test suite.

This module provides common fixtures used across the unit tests, including
settings isolation and a corpus of awkward names for sanitizer properties.
"""

import os
from collections.abc import Iterator

import pytest

from diskkit.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear DISKKIT_* environment variables and the settings cache.

    Settings are cached process-wide; every test starts and ends with an
    empty cache so environment changes made by one test never leak.
    """
    for key in list(os.environ):
        if key.startswith("DISKKIT_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


NAME_CORPUS: list[str] = [
    "",
    " ",
    "alpha",
    "alpha.bravo",
    "...",
    "_._._",
    "  leading and trailing  ",
    "\"'“”‘’«»",
    '"alpha" bravo',
    "alpha \u00a0\u2003\u3000 bravo",
    "line\r\nbreak\u2028separator",
    "C:\\Users\\alpha\\Documents\\file.txt",
    "/var/tmp/../etc/passwd",
    "what?*|<>:;,",
    "alpha-bravo–charlie—delta",
    "(alpha) [bravo] {charlie}",
    "àlpha niño 縦書き 😀 € $",
    "e\u0301le\u0300ve",
    "👩‍👩‍👧‍👦 family_photo.jpg",
    "\ufeffbom prefixed",
    "null\x00byte and bell\x07",
    "tab\tseparated\tvalues",
    "«_» „German“ ‚single‘",
    "مرحبا_بالعالم.txt",
    "Ελληνικά: κείμενο",
]


@pytest.fixture(params=NAME_CORPUS)
def awkward_name(request: pytest.FixtureRequest) -> str:
    """Provide each name of the awkward-name corpus in turn."""
    return request.param
