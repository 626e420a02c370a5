import pytest

from DP4BioInfo.seq_alignment.cli import main

U = "ATATAGGGAGATATAGAGA"
V = "AGAGGGGTTATAAGGGAGAG"


def test_global(capsys):
    assert main(["global", U, V]) == 0
    out = capsys.readouterr().out
    assert "Score: 36" in out
    assert "Type: global" in out


def test_local_with_scoring_flags(capsys):
    assert main(["local", U, V, "--match", "5", "--mismatch", "-3", "--gap", "-4"]) == 0
    assert "Score: 48" in capsys.readouterr().out


def test_lcs(capsys):
    assert main(["lcs", "ATGAT", "TTAGT"]) == 0
    out = capsys.readouterr().out
    assert "The longest common subsequence is:" in out
    assert "AGT" in out
    assert "Length: 3" in out


def test_show_matrix(capsys):
    assert main(["lcs", "AB", "BA", "--show-matrix"]) == 0
    assert "   0   0   1" in capsys.readouterr().out


def test_hamming(capsys):
    assert main(["hamming", "ATGAT", "TTAGT"]) == 0
    assert "The Hamming distance is: 3" in capsys.readouterr().out


def test_hamming_length_mismatch(capsys):
    assert main(["hamming", "ATGAT", "TTAG"]) == 1
    assert "same length" in capsys.readouterr().err


def test_non_integer_score_is_fatal():
    with pytest.raises(SystemExit) as excinfo:
        main(["global", "AC", "AG", "--gap", "x"])
    assert excinfo.value.code == 2


def test_one_sequence_is_an_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["global", "AC"])
    assert excinfo.value.code == 2


def test_interactive(monkeypatch, capsys):
    answers = iter(["ACGT", "ACGT", "5", "-3", "-4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["global"]) == 0
    assert "Score: 20" in capsys.readouterr().out


def test_interactive_bad_integer(monkeypatch):
    answers = iter(["ACGT", "ACGT", "five"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    with pytest.raises(SystemExit) as excinfo:
        main(["local"])
    assert excinfo.value.code == 2


def test_fasta(tmp_path, capsys):
    path = tmp_path / "pair.fa"
    path.write_text(f">u\n{U}\n>v\n{V}\n")
    assert main(["global", "--fasta", str(path)]) == 0
    assert "Score: 36" in capsys.readouterr().out


def test_fasta_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["global", "--fasta", str(tmp_path / "nope.fa")])
    assert excinfo.value.code == 2


def test_fasta_with_repeated_names(tmp_path, capsys):
    path = tmp_path / "dup.fa"
    path.write_text(">s\nACGT\n>s\nACGT\n>t\nTTTT\n")
    assert main(["global", "--fasta", str(path)]) == 0
    assert "Score: 20" in capsys.readouterr().out
