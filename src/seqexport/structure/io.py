#!/usr/bin/env python3
"""Structure file reading utilities.

This module provides functions for reading protein structure files
in PDB and mmCIF formats using both Gemmi and BioPython parsers.
"""

import logging
from pathlib import Path

import gemmi
from Bio.PDB import PDBParser
from Bio.PDB.MMCIFParser import MMCIFParser
from Bio.PDB.Structure import Structure

from seqexport import constants

LOGGER = logging.getLogger(__name__)


def check_structure_path(file_path: str) -> Path:
    """Validate that a structure file exists and has a known extension.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the extension is not a PDB or mmCIF one.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix not in constants.SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Unrecognized file format: {suffix or '(none)'}. Expected one of "
            f"{', '.join(constants.SUPPORTED_EXTENSIONS)}"
        )
    if not path.is_file():
        raise FileNotFoundError(f"Structure file {file_path} not found")
    return path


def read_structure_gemmi(file_path: str) -> gemmi.Structure:
    """Read a structure file using Gemmi.

    Args:
        file_path: Path to PDB or mmCIF file.

    Returns:
        Gemmi Structure object.
    """
    check_structure_path(file_path)
    structure = gemmi.read_structure(file_path)
    LOGGER.info(f"Read structure from {file_path} using Gemmi")
    return structure


def read_structure_biopython(file_path: str) -> Structure:
    """Read a structure file using BioPython.

    Args:
        file_path: Path to PDB or mmCIF file.

    Returns:
        BioPython Structure object.
    """
    path = check_structure_path(file_path)
    if path.suffix.lower() == ".cif":
        parser = MMCIFParser(QUIET=True)
    else:
        parser = PDBParser(QUIET=True)

    structure = parser.get_structure(path.stem, file_path)
    LOGGER.info(f"Read structure from {file_path} using BioPython")
    return structure
