#!/usr/bin/env python3
"""Export chains as FASTA-like sequence records.

Each valid chain becomes one record::

    >{file} {chain_id}  {n_res} {resolution:7.3f}
    {one-letter codes, 60 per line}

Spaces in the chain id are printed as ``-``. Invalid chains are skipped
without writing anything. An empty destination path writes to standard
output; any other path is opened for appending, so repeated exports
accumulate in the same file.

Key functions:
- export: Write every valid chain to a destination
- format_record: Render the text of a single chain
- open_destination: Acquire and release the output stream
"""

import contextlib
import logging
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, TextIO

from seqexport import constants
from seqexport.types import Chain
from seqexport.util import three_to_one

LOGGER = logging.getLogger(__name__)

STDOUT = "<stdout>"

Translator = Callable[[str], str]


class DestinationError(Exception):
    """Raised when the sequence file cannot be opened for writing."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        message = f"Error writing sequence file {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


@dataclass(frozen=True)
class ExportResult:
    """Summary of a completed export."""

    destination: str
    chains_written: int
    chains_skipped: int
    residues_written: int


@contextlib.contextmanager
def open_destination(path: str) -> Iterator[TextIO]:
    """Yield the stream to write records to.

    An empty path yields ``sys.stdout``, which is flushed but never closed.
    Otherwise the file is opened in append mode and closed on exit.

    Raises:
        DestinationError: If the file cannot be opened.
    """
    if not path:
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as err:
        raise DestinationError(path, err.strerror or str(err)) from err

    with handle:
        yield handle


def format_header(chain: Chain) -> str:
    return constants.HEADER_FORMAT.format(
        file=chain.file,
        chain_id=chain.display_id,
        n_res=chain.n_res,
        resolution=chain.resolution,
    )


def format_body(chain: Chain, translate: Translator = three_to_one) -> str:
    """Render residue codes with a line break after every full line.

    A break precedes residue 60, 120, ... but never the first residue, and
    the body always ends with exactly one newline. An empty chain renders
    as a single newline.
    """
    parts = []
    for idx, residue in enumerate(chain.residues):
        if idx % constants.LINE_WIDTH == 0 and idx != 0:
            parts.append("\n")
        parts.append(translate(residue.res_type))
    parts.append("\n")
    return "".join(parts)


def format_record(chain: Chain, translate: Translator = three_to_one) -> str:
    return format_header(chain) + format_body(chain, translate)


class SequenceExporter:
    """Writes chains to a sequence file using a residue code translator.

    Args:
        translate: Maps a three-letter residue name to one character.
    """

    def __init__(self, translate: Translator = three_to_one) -> None:
        self.translate = translate

    def export(
        self, chains: Iterable[Chain], destination_path: str = ""
    ) -> ExportResult:
        """Write each valid chain, in order, to the destination.

        Args:
            chains: Chains to export; invalid ones are skipped.
            destination_path: File to append to, or "" for standard output.

        Returns:
            Counts of what was written.

        Raises:
            DestinationError: If the destination cannot be opened. Nothing
                is written in that case.
        """
        destination = destination_path or STDOUT
        written = skipped = n_residues = 0

        with open_destination(destination_path) as stream:
            for chain in chains:
                if not chain.valid:
                    LOGGER.debug(
                        f"Skipping invalid chain {chain.chain_id!r} "
                        f"from {chain.file}"
                    )
                    skipped += 1
                    continue
                stream.write(format_record(chain, self.translate))
                written += 1
                n_residues += chain.n_res

        LOGGER.info(
            f"Wrote {written} chain(s) ({n_residues} residues) to "
            f"{destination}; skipped {skipped} invalid chain(s)"
        )
        return ExportResult(
            destination=destination,
            chains_written=written,
            chains_skipped=skipped,
            residues_written=n_residues,
        )


def export(
    chains: Iterable[Chain],
    destination_path: str = "",
    translate: Translator = three_to_one,
) -> ExportResult:
    """Export chains with the given translator; see SequenceExporter.export."""
    return SequenceExporter(translate).export(chains, destination_path)
