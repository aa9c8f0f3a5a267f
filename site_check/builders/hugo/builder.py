"""Hugo builder implementation."""

import asyncio
import logging
import shlex
from dataclasses import dataclass
from pathlib import Path

from site_check.builders.base import BuildError, BuildOutput, SiteBuilder
from site_check.builders.hugo.config import HugoConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HugoBuilder(SiteBuilder):
    """Runs ``hugo`` as a subprocess and waits for it to exit."""

    config: HugoConfig

    @classmethod
    def from_config(cls, config: HugoConfig) -> "HugoBuilder":
        """Create builder from its configuration."""
        return cls(config=config)

    async def build(self, site_root: Path) -> BuildOutput:
        """Run the build in ``site_root``, capturing its output."""
        argv = self.config.to_argv()
        command = shlex.join(argv)
        log.info("Running %s in %s", command, site_root)

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=site_root,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise BuildError(f"Command failed to start: {command}: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.config.timeout
            )
        except TimeoutError:
            process.kill()
            await process.wait()
            raise BuildError(
                f"Command timed out after {self.config.timeout} seconds: {command}"
            ) from None

        output = BuildOutput(
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
        )
        if process.returncode != 0:
            details = output.stderr.strip() or output.stdout.strip()
            message = f"Command failed with exit code {process.returncode}: {command}"
            raise BuildError(f"{message}\n{details}" if details else message)

        log.debug("Build finished: %s", output.stdout.strip())
        return output
