#!/usr/bin/env python3
"""Constants for seqexport.

This module defines constants used throughout the seqexport package including:
- The FASTA-like record layout (line width, header format)
- Amino acid three-letter to one-letter mappings
- Supported structure file extensions
"""

# Residue codes per body line; a break is written before every 60th code
LINE_WIDTH = 60

# Header layout: file, chain id, two spaces, residue count, resolution
HEADER_FORMAT = ">{file} {chain_id}  {n_res} {resolution:7.3f}\n"

# Resolution reported when the structure header does not carry one
DEFAULT_RESOLUTION = 0.0

# Chain identifier used for the PDB blank chain, and its printed form
BLANK_CHAIN_ID = " "
CHAIN_ID_SPACE_REPLACEMENT = "-"

UNKNOWN_RESIDUE = "X"

SUPPORTED_EXTENSIONS = (".pdb", ".ent", ".cif")

AA_3TO1 = {
    "ALA": "A",
    "CYS": "C",
    "ASP": "D",
    "GLU": "E",
    "PHE": "F",
    "GLY": "G",
    "HIS": "H",
    "ILE": "I",
    "LYS": "K",
    "LEU": "L",
    "MET": "M",
    "ASN": "N",
    "PRO": "P",
    "GLN": "Q",
    "ARG": "R",
    "SER": "S",
    "THR": "T",
    "VAL": "V",
    "TRP": "W",
    "TYR": "Y",
}

# Force-field protonation states and ambiguity codes
NONSTANDARD_3TO1 = {
    "CYX": "C",  # disulphide-bonded cysteine
    "CYM": "C",  # deprotonated cysteine
    "HID": "H",  # delta-protonated histidine
    "HIE": "H",  # epsilon-protonated histidine
    "HIP": "H",  # doubly protonated histidine
    "GLH": "E",  # neutral glutamic acid
    "ASH": "D",  # neutral aspartic acid
    "ASX": "B",
    "GLX": "Z",
    "MSE": "M",
    "SEC": "U",
    "PYL": "O",
}
