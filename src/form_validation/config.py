"""Configuration for asynchronous validation.

Example:
    ```python
    from form_validation import AsyncValidator, ValidationConfig

    config = ValidationConfig(max_concurrency=4, offload_sync_rules=True)
    validator = AsyncValidator.from_validator(sync_validator, config=config)
    ```
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from .exceptions import ConfigurationError


@dataclass
class ValidationConfig:
    """Configuration for ``AsyncValidator`` execution.

    Attributes:
        max_concurrency: Maximum number of rules awaited at the same time.
            None means every rule is started at once. Limiting concurrency
            never skips rules and never changes the order of the errors.
        offload_sync_rules: Run synchronous rules added to an async
            validator in a worker thread (``asyncio.to_thread``) instead of
            on the event loop. Useful when sync rules block.
    """

    max_concurrency: int | None = None
    offload_sync_rules: bool = False

    def __post_init__(self) -> None:
        if self.max_concurrency is not None and (
            isinstance(self.max_concurrency, bool)
            or not isinstance(self.max_concurrency, int)
            or self.max_concurrency < 1
        ):
            raise ConfigurationError(
                "max_concurrency must be a positive integer or None",
                context={"max_concurrency": self.max_concurrency},
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ValidationConfig:
        """Create a config from a dictionary.

        Args:
            data: Mapping of option names to values

        Returns:
            ValidationConfig instance

        Raises:
            ConfigurationError: If the mapping contains unknown options
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown validation config options: {', '.join(unknown)}",
                context={"unknown": unknown, "available": sorted(known)},
            )
        return cls(**data)
