"""Built-in constants for auto-docker-installer."""

SCRIPT_NAME = "auto-docker-installer"
SCRIPT_VERSION = "2.0"

DEFAULT_DOCKER_VERSION = "latest"
MIN_UBUNTU_VERSION = "20.04"
SUPPORTED_OS_ID = "ubuntu"
OS_RELEASE_PATH = "/etc/os-release"

DEFAULT_CONFIG_FILE = ".autodocker.yml"

DEPENDENCY_PACKAGES = (
    "ca-certificates",
    "curl",
    "gnupg",
    "lsb-release",
    "software-properties-common",
    "apt-transport-https",
)

DOCKER_PACKAGES = (
    "docker-ce",
    "docker-ce-cli",
    "containerd.io",
    "docker-buildx-plugin",
    "docker-compose-plugin",
)

KEYRINGS_DIR = "/etc/apt/keyrings"
KEYRINGS_DIR_MODE = "0755"
DOCKER_KEYRING_PATH = "/etc/apt/keyrings/docker.gpg"
DOCKER_GPG_URL = "https://download.docker.com/linux/ubuntu/gpg"
DOCKER_REPO_URL = "https://download.docker.com/linux/ubuntu"
DOCKER_SOURCE_LIST_PATH = "/etc/apt/sources.list.d/docker.list"
REPO_SUITE = "stable"

DOCKER_GROUP = "docker"
DOCKER_SERVICE = "docker"
DOCKER_UNITS = ("docker.service", "containerd.service")
USER_CONFIG_DIR_NAME = ".docker"

TEST_IMAGE = "hello-world"
TEST_EXPECTED_OUTPUT = "Hello from Docker!"

DOWNLOAD_TIMEOUT_SECONDS = 30
