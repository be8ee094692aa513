#!/usr/bin/env python3
"""Command-line interface for seqexport.

Reads one or more structure files, collects their chains and writes every
valid chain as a FASTA-like record. Records go to standard output unless a
sequence file is given, in which case they are appended to it.

Usage:
    seqexport 1abc.pdb
    seqexport 1abc.pdb 2xyz.cif -q sequences.fasta
    seqexport 1abc.pdb -r ABC -c AB
"""

import logging

import click
from Bio.PDB.PDBExceptions import PDBConstructionException

from seqexport import exporter, util
from seqexport.config import PipelineConfig
from seqexport.structure import PARSERS, load_chains

LOGGER = logging.getLogger(__name__)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Write the amino acid sequence of each chain in the given PDB or "
        "mmCIF files in FASTA format, 60 residues per line."
    ),
)
@click.argument(
    "input_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=str),
)
@click.option(
    "-q",
    "--seq-file",
    "seq_file",
    default="",
    type=click.Path(path_type=str),
    help=(
        "Sequence file to append records to. Written to standard output "
        "when omitted."
    ),
)
@click.option(
    "-r",
    "--read-chains",
    "read_chains",
    default=None,
    help="Read only these chains, e.g. 'AB' or 'AA,BB'.",
)
@click.option(
    "-c",
    "--process-chains",
    "process_chains",
    default=None,
    help="Export only these chains, e.g. 'AB' or 'AA,BB'.",
)
@click.option(
    "-p",
    "--parser",
    "parser",
    type=click.Choice(PARSERS, case_sensitive=False),
    default="gemmi",
    show_default=True,
    help="Structure parser used to read the input files.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose logging.",
)
@click.pass_context
def main(
    ctx: click.Context,
    input_files: tuple,
    seq_file: str,
    read_chains: str,
    process_chains: str,
    parser: str,
    verbose: bool,
) -> None:
    """Run the sequence export and exit with status 0 on success."""
    config = PipelineConfig.from_cli_args(
        input_files=input_files,
        seq_file=seq_file,
        read_chains=read_chains,
        process_chains=process_chains,
        parser=parser.lower(),
        verbose=verbose,
    )
    util.configure_logging(config.verbose)

    LOGGER.info(
        f"Starting seqexport with {len(config.input_files)} input(s) "
        f"parser={config.loader.parser} "
        f"output={config.export.seq_file or exporter.STDOUT}"
    )

    chains = []
    for input_file in config.input_files:
        try:
            chains.extend(
                load_chains(
                    input_file,
                    read_chains=config.loader.read_chains,
                    process_chains=config.loader.process_chains,
                    parser=config.loader.parser,
                )
            )
        except (ValueError, RuntimeError, PDBConstructionException) as err:
            raise click.ClickException(
                f"Could not read {input_file}: {err}"
            ) from err

    try:
        result = exporter.export(chains, config.export.seq_file)
    except exporter.DestinationError as err:
        raise click.ClickException(str(err)) from err

    LOGGER.info(
        f"Finished export; {result.chains_written} record(s) written to "
        f"{result.destination}"
    )
    ctx.exit(0)


if __name__ == "__main__":
    main()
