import subprocess
from importlib import metadata

DEVELOPMENT_VERSION = "test"


def _git_revision():
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    return result.stdout.strip() or None


def get_version() -> str:
    """Installed distribution version, else the git revision, else "test"."""
    try:
        return metadata.version("containerview")
    except metadata.PackageNotFoundError:
        pass
    return _git_revision() or DEVELOPMENT_VERSION
