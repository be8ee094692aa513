#!/usr/bin/env python3
"""Structure I/O for seqexport.

This package provides structure file handling including:
- Reading PDB/mmCIF files
- Building Chain records from parsed structures
"""

from seqexport.structure.chains import PARSERS, load_chains
from seqexport.structure.io import (
    check_structure_path,
    read_structure_biopython,
    read_structure_gemmi,
)

__all__ = [
    # I/O
    "check_structure_path",
    "read_structure_gemmi",
    "read_structure_biopython",
    # Chains
    "PARSERS",
    "load_chains",
]
