"""
Run context for the hashtool CLI.

Provides HashContext, which loads configuration and bootstraps the
service container once per invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.bootstrap import bootstrap
from ..core.container import ServiceContainer
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.interfaces.sources import IByteSource
from ..core.models.config import HashToolConfig
from ..core.settings import load_settings
from ..hashing.registry import HashAlgorithmRegistry
from ..services.digest import DigestService


@dataclass
class HashContext:
    """Everything a hash run needs, resolved from config and the container.

    Attributes:
        cwd: Working directory; relative file inputs resolve against it
        config: Loaded configuration
        container: Bootstrapped service container
    """

    cwd: Path
    config: HashToolConfig
    container: ServiceContainer

    @classmethod
    def create(
        cls,
        config_path: Path | None = None,
        verbose: bool = False,
        cwd: Path | None = None,
    ) -> HashContext:
        """Load settings and bootstrap services.

        Raises:
            HashToolConfigError: If the configuration cannot be loaded
        """
        if cwd is None:
            cwd = Path.cwd()

        config = load_settings(config_path=config_path, start_dir=str(cwd)).to_config()
        container = bootstrap(config, verbose=verbose, base_dir=cwd)
        return cls(cwd=cwd, config=config, container=container)

    @property
    def logger(self) -> ILogger:
        return self.container.resolve(ILogger)  # type: ignore[type-abstract]

    @property
    def presenter(self) -> IPresenter:
        return self.container.resolve(IPresenter)  # type: ignore[type-abstract]

    def digest_service(self) -> DigestService:
        return DigestService(
            source=self.container.resolve(IByteSource),  # type: ignore[type-abstract]
            registry=self.container.resolve(HashAlgorithmRegistry),
            logger=self.logger,
        )
