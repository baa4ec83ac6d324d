import pytest

from autodocker.errors import InstallerError, VersionParseError
from autodocker.services.versions import VersionExtractor


def test_engine_version_strips_trailing_comma():
    extractor = VersionExtractor()

    assert extractor.engine_version("Docker version 24.0.7, build afdd53b\n") == "24.0.7"


def test_compose_version_strips_leading_v():
    extractor = VersionExtractor()

    assert extractor.compose_version("Docker Compose version v2.21.0\n") == "2.21.0"


def test_compose_version_without_prefix_is_kept():
    extractor = VersionExtractor()

    assert extractor.compose_version("Docker Compose version 2.29.1") == "2.29.1"


@pytest.mark.parametrize("output", ["", "Docker", "Docker version", "Docker version unknown, build x"])
def test_engine_version_parse_failure_is_distinct_error(output):
    extractor = VersionExtractor()

    with pytest.raises(VersionParseError):
        extractor.engine_version(output)


def test_version_parse_error_is_installer_error():
    assert issubclass(VersionParseError, InstallerError)
