"""
Band catalog: ordered registry of configured bands.

The catalog is built once from a frozen BandConfig and never mutated.
Neighbor lookups are driven purely by ``order``; which neighbor counts as
"harder" depends on whether the band adds resistance or assistance.
"""
import logging
from typing import Dict, List, Optional

from domain.models.band import Band, BandConfig, BandType, Direction

logger = logging.getLogger(__name__)


class BandCatalog:
    """
    Read-only lookup over the configured bands.

    Examples:
        >>> catalog = BandCatalog(BandConfig())
        >>> catalog.neighbor("red", BandType.RESISTANCE, Direction.HARDER)
        'blue'
        >>> catalog.neighbor("red", BandType.ASSISTANCE, Direction.HARDER) is None
        True
    """

    def __init__(self, config: BandConfig):
        self._config = config
        bands = [
            Band(color=color, resistance=spec.resistance, order=spec.order)
            for color, spec in config.colors.items()
        ]
        self._bands: List[Band] = sorted(bands, key=lambda b: b.order)
        self._index: Dict[str, int] = {band.color: i for i, band in enumerate(self._bands)}

    @property
    def config(self) -> BandConfig:
        return self._config

    @property
    def max_reps_before_band_change(self) -> int:
        return self._config.max_reps_before_band_change

    @property
    def default_reps_on_band_change(self) -> int:
        return self._config.default_reps_on_band_change

    @property
    def colors(self) -> List[str]:
        """Band colours in ascending order."""
        return [band.color for band in self._bands]

    def __contains__(self, color: object) -> bool:
        return isinstance(color, str) and self._key(color) in self._index

    def __len__(self) -> int:
        return len(self._bands)

    def get(self, color: str) -> Optional[Band]:
        """Look up a band by colour (case-insensitive)."""
        i = self._index.get(self._key(color))
        return self._bands[i] if i is not None else None

    def resistance_of(self, color: str) -> Optional[float]:
        """Resistance value for a colour, or None if the colour is not configured."""
        band = self.get(color)
        return band.resistance if band else None

    def neighbor(self, color: str, band_type: BandType, direction: Direction) -> Optional[str]:
        """
        The adjacent band in the requested difficulty direction.

        Resistance bands get harder as order increases; assistance bands get
        harder as order decreases.

        Args:
            color: Current band colour
            band_type: Whether the band adds resistance or assistance
            direction: HARDER or EASIER

        Returns:
            Neighbour colour, or None at either boundary or for an unknown colour
        """
        i = self._index.get(self._key(color))
        if i is None:
            logger.debug(f"Unknown band colour '{color}'")
            return None

        step = 1 if direction == Direction.HARDER else -1
        if band_type == BandType.ASSISTANCE:
            step = -step

        j = i + step
        if j < 0 or j >= len(self._bands):
            return None
        return self._bands[j].color

    @staticmethod
    def _key(color: str) -> str:
        return color.strip().lower()
