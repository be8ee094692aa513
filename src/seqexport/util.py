#!/usr/bin/env python3
"""Utility functions for seqexport.

This module provides helper functions for:
- Translating three-letter residue names to one-letter codes
- Configuring logging
"""

import logging

from Bio.Data.PDBData import protein_letters_3to1_extended

from seqexport import constants

LOGGER = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag.

    Args:
        verbose: If True, set logging level to INFO. Otherwise, set to WARNING.
    """
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, force=True)


def three_to_one(code: str) -> str:
    """Translate a three-letter residue name to its one-letter code.

    Standard amino acids are looked up first, then force-field variants
    (CYX, HID, ...), then the PDB chemical component table shipped with
    BioPython. Names that match none of these become ``X``.

    Args:
        code: Three-letter residue name, any case.

    Returns:
        A single uppercase character.
    """
    key = code.strip().upper()
    if key in constants.AA_3TO1:
        return constants.AA_3TO1[key]
    if key in constants.NONSTANDARD_3TO1:
        return constants.NONSTANDARD_3TO1[key]
    one_letter = protein_letters_3to1_extended.get(key)
    if one_letter is None or len(one_letter) != 1:
        LOGGER.debug(f"No one-letter code for residue {code!r}")
        return constants.UNKNOWN_RESIDUE
    return one_letter.upper()
