"""Table-driven country name normalizer.

The feeds spell some countries differently ("U.S.A.", "Bosnia-Herzegovina",
trailing punctuation, ...). The fix-ups are configuration data held in
NamingConfig.overrides; this adapter only applies them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import NamingConfig, get_config


@dataclass
class TableNameNormalizer:
    """Name normalizer backed by a raw -> canonical override table.

    This adapter implements NameNormalizerPort.

    Attributes:
        config: Naming configuration holding the override table
    """

    config: NamingConfig = field(default_factory=lambda: get_config().naming)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def normalize(self, raw: str) -> str:
        """Return the canonical vertex name for ``raw``.

        Names without an override are returned stripped but otherwise
        unchanged.
        """
        name = raw.strip()
        canonical = self.config.overrides.get(name)
        if canonical is None:
            return name

        self._logger.debug(
            "Country name overridden",
            extra={"raw": name, "canonical": canonical},
        )
        return canonical
