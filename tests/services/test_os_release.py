import pytest

from autodocker.errors import PreconditionError
from autodocker.models import PlatformDescriptor
from autodocker.services.os_release import PlatformService

UBUNTU_2204 = """\
PRETTY_NAME="Ubuntu 22.04.4 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
VERSION="22.04.4 LTS (Jammy Jellyfish)"
VERSION_CODENAME=jammy
ID=ubuntu
ID_LIKE=debian
"""


class DummyLogger:
    def info(self, *_args, **_kwargs):
        return None


class DummyConsole:
    def __init__(self):
        self.messages = []

    def print(self, *args, **_kwargs):
        self.messages.append(" ".join(str(arg) for arg in args))


def _service(path="/nonexistent/os-release"):
    return PlatformService(logger=DummyLogger(), console=DummyConsole(), os_release_path=str(path))


def _platform(version_id, distribution_id="ubuntu", codename="jammy"):
    return PlatformDescriptor(distribution_id=distribution_id, version_id=version_id, codename=codename)


def test_parse_os_release_strips_quotes_and_comments():
    values = PlatformService.parse_os_release(
        "# comment\n\nID=ubuntu\nNAME='Ubuntu'\nVERSION_ID=\"24.04\"\nBROKEN LINE\n"
    )

    assert values == {"ID": "ubuntu", "NAME": "Ubuntu", "VERSION_ID": "24.04"}


def test_detect_reads_descriptor_from_file(tmp_path):
    os_release = tmp_path / "os-release"
    os_release.write_text(UBUNTU_2204, encoding="utf-8")

    platform = _service(os_release).detect()

    assert platform == PlatformDescriptor(distribution_id="ubuntu", version_id="22.04", codename="jammy")


def test_missing_os_release_is_rejected(tmp_path):
    with pytest.raises(PreconditionError, match="designed for Ubuntu only"):
        _service(tmp_path / "missing").detect()


@pytest.mark.parametrize("version_id", ["20.04", "20.10", "22.04", "22.04.3", "24.04", "24.10"])
def test_supported_versions_are_accepted(version_id):
    service = _service()

    service.validate(_platform(version_id), minimum="20.04")

    assert f"Detected Ubuntu {version_id} (jammy)" in service.console.messages[-1]


@pytest.mark.parametrize("version_id", ["18.04", "19.10", "20.03", "16.04.7"])
def test_older_versions_are_rejected(version_id):
    with pytest.raises(PreconditionError, match=f"Ubuntu {version_id} is not supported"):
        _service().validate(_platform(version_id), minimum="20.04")


def test_minor_versions_compare_numerically():
    service = _service()

    service.validate(_platform("20.10"), minimum="20.4")

    with pytest.raises(PreconditionError):
        service.validate(_platform("20.4"), minimum="20.10")


@pytest.mark.parametrize("os_id", ["debian", "fedora", "linuxmint", ""])
def test_other_distributions_are_rejected_with_detected_id(os_id):
    expected = os_id or "<unknown>"

    with pytest.raises(PreconditionError, match=f"Detected OS: {expected}"):
        _service().validate(_platform("22.04", distribution_id=os_id), minimum="20.04")


def test_unparseable_version_is_rejected():
    with pytest.raises(PreconditionError, match="Unrecognized Ubuntu version"):
        _service().validate(_platform("jammy"), minimum="20.04")


def test_missing_codename_is_rejected():
    with pytest.raises(PreconditionError, match="VERSION_CODENAME"):
        _service().validate(_platform("22.04", codename=""), minimum="20.04")
