"""Actionable error catalog for auto-docker-installer."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "running_as_root": {
        "what": "This script should not be run as root. It will use sudo when needed.",
        "next": "Run the installer again as a regular user with sudo rights.",
    },
    "sudo_failed": {
        "what": "Sudo authentication failed.",
        "next": "Check that your account is allowed to use sudo and enter the correct password.",
    },
    "os_release_missing": {
        "what": "This script is designed for Ubuntu only. {path} was not found.",
        "next": "Run the installer on an Ubuntu host.",
    },
    "unsupported_os": {
        "what": "This script is designed for Ubuntu only. Detected OS: {os_id}",
        "next": "Follow https://docs.docker.com/engine/install/ for your distribution.",
    },
    "unsupported_version": {
        "what": "Ubuntu {version} is not supported. Minimum required: {minimum}",
        "next": "Upgrade the host to a supported Ubuntu release.",
    },
    "apt_update_failed": {
        "what": "Failed to update package lists.",
        "next": "Check network access and the entries under /etc/apt/sources.list.d/.",
    },
    "dependencies_failed": {
        "what": "Failed to install dependencies.",
        "next": "Run `sudo apt-get install` for the prerequisites manually to see the APT error.",
    },
    "keyring_dir_failed": {
        "what": "Failed to create the keyring directory {path}.",
        "next": "Check permissions on /etc/apt and retry.",
    },
    "gpg_key_failed": {
        "what": "Failed to add Docker GPG key.",
        "next": "Check that {url} is reachable and that gnupg is installed.",
    },
    "repo_update_failed": {
        "what": "Failed to update package lists with Docker repository.",
        "next": "Inspect {path} and run `sudo apt-get update` to see the APT error.",
    },
    "source_list_failed": {
        "what": "Failed to write the Docker repository definition to {path}.",
        "next": "Check permissions on /etc/apt/sources.list.d and retry.",
    },
    "packages_failed": {
        "what": "Failed to install Docker packages.",
        "next": "Check that version '{version}' exists with `apt-cache madison docker-ce`.",
    },
    "usermod_failed": {
        "what": "Failed to add user {user} to docker group.",
        "next": "Run `sudo usermod -aG docker {user}` manually.",
    },
    "enable_failed": {
        "what": "Failed to enable Docker services.",
        "next": "Inspect `systemctl status docker.service containerd.service`.",
    },
    "start_failed": {
        "what": "Failed to start Docker service.",
        "next": "Inspect `journalctl -u docker.service` for the cause.",
    },
    "user_dir_failed": {
        "what": "Failed to create {path}.",
        "next": "Check permissions on your home directory.",
    },
    "chown_failed": {
        "what": "Failed to set ownership of {path} to {user}.",
        "next": "Run `sudo chown -R {user}: {path}` manually.",
    },
    "docker_missing": {
        "what": "Docker command not found.",
        "next": "Check the APT output above and confirm docker-ce-cli is installed.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
