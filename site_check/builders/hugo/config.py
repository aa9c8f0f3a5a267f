"""Configuration for the Hugo builder."""

from collections.abc import Sequence

from pydantic import Field, PositiveFloat

from site_check.models.base import Model


class HugoConfig(Model):
    """Configuration for the Hugo builder."""

    command: Sequence[str] = Field(
        default=("hugo",), min_length=1, description="Executable and leading args"
    )
    minify: bool = True
    extra_args: Sequence[str] = ()
    # None waits for the build indefinitely
    timeout: PositiveFloat | None = None

    def to_argv(self) -> Sequence[str]:
        """Full command line for one build."""
        argv = [*self.command]
        if self.minify:
            argv.append("--minify")
        argv.extend(self.extra_args)
        return argv
