"""Abstract base class for site builders."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


class BuildError(Exception):
    """Raised when the external build fails to start, fails or times out."""


@dataclass(frozen=True, kw_only=True)
class BuildOutput:
    """Captured output of a successful build."""

    stdout: str = ""
    stderr: str = ""


class SiteBuilder(ABC):
    """Runs the external static-site generator for a project root.

    Implementations block until the build finished and never stream its
    output; the caller only learns whether the build succeeded.
    """

    @abstractmethod
    async def build(self, site_root: Path) -> BuildOutput:
        """Build the site in ``site_root``.

        Args:
            site_root: Project root the generator runs in

        Returns:
            Captured output of the build

        Raises:
            BuildError: If the build could not be started or did not succeed

        """
