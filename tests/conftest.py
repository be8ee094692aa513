"""Shared test fixtures and utilities for seqexport tests."""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

import pytest

from seqexport.types import Chain, Residue

# (chain id, residue names) pairs used to build small structures
ChainSpec = Tuple[str, Sequence[str]]


def make_chain(
    residue_names: Iterable[str],
    file: str = "1abc",
    chain_id: str = "A",
    resolution: float = 2.0,
    valid: bool = True,
) -> Chain:
    """Build a Chain from three-letter residue names."""
    return Chain(
        file=file,
        chain_id=chain_id,
        residues=[Residue(res_type=name) for name in residue_names],
        resolution=resolution,
        valid=valid,
    )


def _atom_line(
    record: str,
    serial: int,
    atom_name: str,
    res_name: str,
    chain_id: str,
    res_seq: int,
    element: str,
) -> str:
    x = float(serial) * 1.5
    return (
        f"{record:<6}{serial:>5} {atom_name:<4} {res_name:>3} {chain_id:1}"
        f"{res_seq:>4}    {x:>8.3f}{0.0:>8.3f}{0.0:>8.3f}"
        f"{1.0:>6.2f}{0.0:>6.2f}          {element:>2}"
    )


def create_minimal_pdb(
    chains: Sequence[ChainSpec],
    resolution: Optional[float] = None,
    waters: Sequence[str] = (),
    ligands: Sequence[ChainSpec] = (),
) -> str:
    """Create PDB file content with one CA atom per residue.

    Args:
        chains: (chain id, residue names) for each protein chain.
        resolution: Written as a REMARK 2 record when given.
        waters: Chain ids that get one HOH molecule each.
        ligands: (chain id, residue names) for hetero groups.
    """
    lines: List[str] = ["HEADER    TEST STRUCTURE"]
    if resolution is not None:
        lines.append(f"REMARK   2 RESOLUTION. {resolution:>7.2f} ANGSTROMS.")

    serial = 1
    for chain_id, residue_names in chains:
        for res_seq, res_name in enumerate(residue_names, start=1):
            lines.append(
                _atom_line(
                    "ATOM", serial, " CA", res_name, chain_id, res_seq, "C"
                )
            )
            serial += 1
        lines.append("TER")
    for chain_id, residue_names in ligands:
        for offset, res_name in enumerate(residue_names):
            lines.append(
                _atom_line(
                    "HETATM", serial, " C1", res_name, chain_id,
                    500 + offset, "C",
                )
            )
            serial += 1
    for offset, chain_id in enumerate(waters):
        lines.append(
            _atom_line(
                "HETATM", serial, " O", "HOH", chain_id, 900 + offset, "O"
            )
        )
        serial += 1
    lines.append("END")
    return "\n".join(lines) + "\n"


def write_minimal_pdb(
    path: Path, chains: Sequence[ChainSpec], **kwargs
) -> str:
    path.write_text(create_minimal_pdb(chains, **kwargs))
    return str(path)


@pytest.fixture
def two_chain_pdb(tmp_path: Path) -> str:
    """A structure with protein chains A and B, a water and a ligand."""
    return write_minimal_pdb(
        tmp_path / "2ab.pdb",
        [("A", ["MET", "LYS", "VAL"]), ("B", ["GLY", "SER"])],
        resolution=1.85,
        waters=["A"],
        ligands=[("B", ["NAG"])],
    )
