#!/usr/bin/env python3
"""Configuration dataclasses for the seqexport pipeline.

This module provides configuration dataclasses that consolidate
pipeline parameters, making it easier to manage and pass configuration
from the command line down to the loader and the exporter.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


def parse_chain_selection(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    """Split a chain selection such as "AB" into ("A", "B").

    When the selection contains a comma it is split on commas instead, so
    multi-character mmCIF ids can be given ("AA,BB"). An empty or missing
    selection means "all chains" and returns None.
    """
    if not value:
        return None
    if "," in value:
        ids = tuple(t.strip() for t in value.split(",") if t.strip())
    else:
        ids = tuple(value)
    return ids or None


@dataclass(frozen=True)
class ExportConfig:
    """Configuration for writing the sequence file.

    Attributes:
        seq_file: File to append records to; empty for standard output.
    """

    seq_file: str = ""


@dataclass(frozen=True)
class LoaderConfig:
    """Configuration for reading chains from structure files.

    Attributes:
        parser: Structure parser backend ("gemmi" or "biopython").
        read_chains: Chain ids to read; None reads all chains.
        process_chains: Chain ids to export; None exports all chains.
    """

    parser: str = "gemmi"
    read_chains: Optional[Tuple[str, ...]] = None
    process_chains: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class PipelineConfig:
    """Complete configuration for a sequence export run.

    Example:
        config = PipelineConfig(
            input_files=("1abc.pdb",),
            export=ExportConfig(seq_file="1abc.fasta"),
        )
    """

    input_files: Tuple[str, ...]
    export: ExportConfig = field(default_factory=ExportConfig)
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    verbose: bool = False

    @classmethod
    def from_cli_args(
        cls,
        input_files: Tuple[str, ...],
        seq_file: str = "",
        read_chains: Optional[str] = None,
        process_chains: Optional[str] = None,
        parser: str = "gemmi",
        verbose: bool = False,
    ) -> "PipelineConfig":
        """Create a PipelineConfig from CLI arguments."""
        return cls(
            input_files=tuple(input_files),
            export=ExportConfig(seq_file=seq_file or ""),
            loader=LoaderConfig(
                parser=parser,
                read_chains=parse_chain_selection(read_chains),
                process_chains=parse_chain_selection(process_chains),
            ),
            verbose=verbose,
        )
