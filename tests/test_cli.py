import pytest
from Bio.PDB.PDBExceptions import PDBConstructionException
from click.testing import CliRunner

from conftest import write_minimal_pdb
from seqexport import cli


def test_cli_writes_to_stdout(two_chain_pdb):
    runner = CliRunner()
    result = runner.invoke(cli.main, [two_chain_pdb])

    assert result.exit_code == 0, result.output
    assert result.stdout == (
        f">{two_chain_pdb} A  3   1.850\nMKV\n"
        f">{two_chain_pdb} B  2   1.850\nGS\n"
    )


def test_cli_appends_to_seq_file(two_chain_pdb, tmp_path):
    seq_file = tmp_path / "seqs.fasta"
    runner = CliRunner()

    for _ in range(2):
        result = runner.invoke(
            cli.main, [two_chain_pdb, "-q", str(seq_file), "-c", "B"]
        )
        assert result.exit_code == 0, result.output

    record = f">{two_chain_pdb} B  2   1.850\nGS\n"
    assert seq_file.read_text() == record + record


def test_cli_multiple_inputs_keep_order(tmp_path):
    first = write_minimal_pdb(tmp_path / "first.pdb", [("A", ["TRP"])])
    second = write_minimal_pdb(tmp_path / "second.pdb", [("A", ["CYS"])])
    runner = CliRunner()

    result = runner.invoke(cli.main, [second, first, "-p", "biopython"])

    assert result.exit_code == 0, result.output
    assert result.stdout == (
        f">{second} A  1   0.000\nC\n>{first} A  1   0.000\nW\n"
    )


def test_cli_read_chains_option(two_chain_pdb):
    runner = CliRunner()
    result = runner.invoke(cli.main, [two_chain_pdb, "-r", "A"])

    assert result.exit_code == 0, result.output
    assert result.stdout.count(">") == 1
    assert " A  3 " in result.stdout


def test_cli_unwritable_destination(two_chain_pdb, tmp_path):
    missing = tmp_path / "missing_dir" / "seqs.fasta"
    runner = CliRunner()

    result = runner.invoke(cli.main, [two_chain_pdb, "-q", str(missing)])

    assert result.exit_code != 0
    assert str(missing) in result.output
    assert not missing.exists()


def test_cli_rejects_unsupported_input(tmp_path):
    bad = tmp_path / "model.txt"
    bad.write_text("not a structure\n")
    runner = CliRunner()

    result = runner.invoke(cli.main, [str(bad)])

    assert result.exit_code != 0
    assert "Unrecognized file format" in result.output


def test_cli_requires_input():
    runner = CliRunner()
    result = runner.invoke(cli.main, [])
    assert result.exit_code != 0


@pytest.mark.parametrize(
    "error",
    [
        RuntimeError("gemmi could not parse the file"),
        PDBConstructionException("broken atom record"),
    ],
)
def test_cli_reports_parser_errors(
    two_chain_pdb, tmp_path, monkeypatch, error
):
    """Parser failures become a clean error naming the input file."""
    seq_file = tmp_path / "seqs.fasta"

    def failing_load_chains(*args, **kwargs):
        raise error

    monkeypatch.setattr(cli, "load_chains", failing_load_chains)
    runner = CliRunner()

    result = runner.invoke(cli.main, [two_chain_pdb, "-q", str(seq_file)])

    assert result.exit_code == 1
    assert f"Could not read {two_chain_pdb}" in result.output
    assert str(error) in result.output
    assert not isinstance(result.exception, type(error))
    assert not seq_file.exists()


def test_cli_comma_chain_selection(two_chain_pdb):
    runner = CliRunner()
    result = runner.invoke(cli.main, [two_chain_pdb, "-c", "B,"])

    assert result.exit_code == 0, result.output
    assert result.stdout == f">{two_chain_pdb} B  2   1.850\nGS\n"
