"""Static mapping from environment name to build profile."""

import os
import typing as t
from pathlib import Path

from ..domain.environment import DeploymentTarget, EnvironmentName, resolve_environment
from ..domain.exceptions import ConfigurationError
from ..domain.profile import Profile


class _ProfileSpec(t.NamedTuple):
    output_dir: str
    public_path: str
    features: tuple[str, ...]
    entry: str
    history_fallback: str | None = None


# Output directories are relative to the UI crate root.
_TARGET_PROFILES: t.Final[
    dict[DeploymentTarget, dict[EnvironmentName, _ProfileSpec]]
] = {
    DeploymentTarget.WEB: {
        EnvironmentName.PRODUCTION: _ProfileSpec(
            output_dir="../devand-web/static/ui",
            public_path="/public/ui/",
            features=(),
            entry="./bootstrap-prod.js",
            history_fallback="/index.html",
        ),
        EnvironmentName.DEVELOPMENT: _ProfileSpec(
            output_dir="dist",
            public_path="/",
            features=("mock_http",),
            entry="./bootstrap-dev.js",
            history_fallback="/index.html",
        ),
    },
    DeploymentTarget.DEMO: {
        EnvironmentName.PRODUCTION: _ProfileSpec(
            output_dir="dist",
            public_path="/",
            features=(),
            entry="./bootstrap.js",
            history_fallback="/index.html",
        ),
        EnvironmentName.DEVELOPMENT: _ProfileSpec(
            output_dir="dist",
            public_path="",
            features=("mock_http",),
            entry="./bootstrap.js",
            history_fallback="/index.html",
        ),
    },
}


class ProfileTable:
    """Total, read-only mapping from EnvironmentName to Profile.

    Construction fails if any environment is missing, so lookups of a
    valid EnvironmentName never fall through to a default.
    """

    def __init__(self, profiles: t.Mapping[EnvironmentName, Profile]) -> None:
        missing = [name for name in EnvironmentName if name not in profiles]
        if missing:
            raise ConfigurationError(
                "profile table has no entry for: "
                + ", ".join(name.value for name in missing)
            )
        self._profiles = {name: profiles[name] for name in EnvironmentName}

    @classmethod
    def for_target(
        cls, target: DeploymentTarget | str, ui_root: Path | str
    ) -> "ProfileTable":
        """Build the table for a deployment target.

        Args:
            target: Deployment target (enum member or its value)
            ui_root: Root of the UI crate; made absolute if relative

        Raises:
            ConfigurationError: If the target is unknown
        """
        try:
            specs = _TARGET_PROFILES[DeploymentTarget(target)]
        except ValueError:
            raise ConfigurationError(
                f"unknown deployment target: {target!r}", selector=target
            ) from None

        root = Path(os.path.abspath(ui_root))
        return cls(
            {
                name: Profile(
                    output_dir=Path(os.path.normpath(root / spec.output_dir)),
                    public_path=spec.public_path,
                    features=spec.features,
                    entry=spec.entry,
                    history_fallback=spec.history_fallback,
                )
                for name, spec in specs.items()
            }
        )

    @property
    def environments(self) -> tuple[EnvironmentName, ...]:
        """Environment names covered by the table, in enumeration order."""
        return tuple(self._profiles)

    def lookup(self, name: EnvironmentName | str) -> Profile:
        """Return the profile for ``name``.

        Raises:
            ConfigurationError: If ``name`` is not a known environment
        """
        return self._profiles[resolve_environment(name)]

    def __iter__(self) -> t.Iterator[tuple[EnvironmentName, Profile]]:
        return iter(self._profiles.items())

    def __len__(self) -> int:
        return len(self._profiles)
