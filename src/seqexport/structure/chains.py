#!/usr/bin/env python3
"""Build Chain records from structure files.

Only the first model is used. Each chain keeps its amino acid residues in
file order; waters and other hetero groups are dropped. Chains can be
filtered two ways:

- read_chains: chains not listed are left out entirely
- process_chains: chains not listed are kept but marked invalid, so the
  exporter skips them

A chain without any amino acid residue is also marked invalid.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import gemmi
from Bio.PDB.Polypeptide import is_aa

from seqexport import constants
from seqexport.structure.io import (
    read_structure_biopython,
    read_structure_gemmi,
)
from seqexport.types import Chain, Residue

LOGGER = logging.getLogger(__name__)

PARSERS = ("gemmi", "biopython")


def _normalize_chain_id(chain_id: str) -> str:
    return chain_id if chain_id.strip() else constants.BLANK_CHAIN_ID


def _is_known_amino_acid(res_name: str) -> bool:
    """True for standard and force-field amino acid names (HID, CYX, ...)."""
    key = res_name.strip().upper()
    return key in constants.AA_3TO1 or key in constants.NONSTANDARD_3TO1


def _collect_gemmi(
    file_path: str,
) -> Tuple[Dict[str, List[Residue]], float]:
    structure = read_structure_gemmi(file_path)
    resolution = structure.resolution or constants.DEFAULT_RESOLUTION
    if len(structure) == 0:
        return {}, resolution

    # Ligand and water blocks of a chain may come back as separate
    # gemmi chains with the same name; merge them by id.
    residues: Dict[str, List[Residue]] = {}
    for chain in structure[0]:
        chain_residues = residues.setdefault(
            _normalize_chain_id(chain.name), []
        )
        for residue in chain:
            if residue.is_water():
                continue
            if not _is_known_amino_acid(residue.name):
                info = gemmi.find_tabulated_residue(residue.name)
                if info is None or not info.is_amino_acid():
                    continue
            chain_residues.append(Residue(res_type=residue.name))
    return residues, resolution


def _collect_biopython(
    file_path: str,
) -> Tuple[Dict[str, List[Residue]], float]:
    structure = read_structure_biopython(file_path)
    resolution = (
        structure.header.get("resolution") or constants.DEFAULT_RESOLUTION
    )
    models = list(structure)
    if not models:
        return {}, resolution

    residues: Dict[str, List[Residue]] = {}
    for chain in models[0]:
        chain_residues = residues.setdefault(_normalize_chain_id(chain.id), [])
        for residue in chain:
            res_name = residue.get_resname()
            if not (
                _is_known_amino_acid(res_name)
                or is_aa(residue, standard=False)
            ):
                continue
            chain_residues.append(Residue(res_type=res_name))
    return residues, resolution


def load_chains(
    file_path: str,
    read_chains: Optional[Sequence[str]] = None,
    process_chains: Optional[Sequence[str]] = None,
    parser: str = "gemmi",
) -> List[Chain]:
    """Read a structure file into Chain records.

    Args:
        file_path: PDB or mmCIF file. Stored verbatim as ``Chain.file``.
        read_chains: If given, only these chain ids are returned.
        process_chains: If given, chains outside this set are invalid.
        parser: "gemmi" or "biopython".

    Returns:
        Chains in file order.

    Raises:
        ValueError: If the parser or the file extension is unknown.
        FileNotFoundError: If the file does not exist.
    """
    if parser == "gemmi":
        residues_by_chain, resolution = _collect_gemmi(file_path)
    elif parser == "biopython":
        residues_by_chain, resolution = _collect_biopython(file_path)
    else:
        raise ValueError(
            f"Unknown parser {parser!r}. Expected one of {', '.join(PARSERS)}"
        )

    chains = []
    for chain_id, residues in residues_by_chain.items():
        if read_chains is not None and chain_id not in read_chains:
            LOGGER.debug(f"Not reading chain {chain_id!r} of {file_path}")
            continue
        valid = bool(residues)
        if process_chains is not None and chain_id not in process_chains:
            valid = False
        if not residues:
            LOGGER.info(
                f"Chain {chain_id!r} of {file_path} has no amino acid residues"
            )
        chains.append(
            Chain(
                file=file_path,
                chain_id=chain_id,
                residues=residues,
                resolution=resolution,
                valid=valid,
            )
        )

    LOGGER.info(
        f"Loaded {len(chains)} chain(s) from {file_path} "
        f"(resolution {resolution:.3f})"
    )
    return chains
