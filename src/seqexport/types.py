#!/usr/bin/env python3

import logging
from dataclasses import dataclass, field
from typing import Tuple

from seqexport import constants

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Residue:
    """One position in a chain, named by its three-letter residue code."""

    res_type: str


@dataclass(frozen=True)
class Chain:
    """Ordered residues of one chain plus the bookkeeping of its source."""

    file: str
    chain_id: str
    residues: Tuple[Residue, ...] = field(default_factory=tuple)
    resolution: float = constants.DEFAULT_RESOLUTION
    valid: bool = True

    def __post_init__(self) -> None:
        if not self.chain_id:
            raise ValueError(
                f"chain_id must be a non-empty string; use "
                f"{constants.BLANK_CHAIN_ID!r} for a blank chain. "
                f"Error raised for {self.file}"
            )
        # Accept any iterable of residues but store an immutable tuple
        object.__setattr__(self, "residues", tuple(self.residues))
        object.__setattr__(self, "resolution", float(self.resolution))

        LOGGER.debug(
            f"Initialized Chain {self.chain_id!r} from {self.file} "
            f"(n_res={self.n_res}, valid={self.valid})"
        )

    @property
    def n_res(self) -> int:
        return len(self.residues)

    @property
    def display_id(self) -> str:
        """Chain id with spaces replaced so headers split cleanly."""
        return self.chain_id.replace(" ", constants.CHAIN_ID_SPACE_REPLACEMENT)
