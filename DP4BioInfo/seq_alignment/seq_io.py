"""
Sequence input helpers (FASTA)
"""
from typing import Dict, List, Tuple


def read_records(filename: str) -> List[Tuple[str, str]]:
    """
    Read FASTA records in file order

    Args:
        filename: Path to FASTA file

    Returns:
        list: (name, sequence) pairs; repeated names are kept as separate records
    """
    records: List[Tuple[str, str]] = []
    current_name = None
    current_seq: List[str] = []

    with open(filename, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith(';'):
                continue
            if line.startswith('>'):
                if current_name is not None:
                    records.append((current_name, ''.join(current_seq)))
                current_name = line[1:].split()[0] if line[1:].strip() else f"seq{len(records) + 1}"
                current_seq = []
            else:
                if current_name is None:
                    raise ValueError(f"{filename}: sequence data before the first '>' header")
                current_seq.append(line)

        if current_name is not None:
            records.append((current_name, ''.join(current_seq)))

    return records


def read_fasta(filename: str) -> Dict[str, str]:
    """
    Read sequences from FASTA format file

    Args:
        filename: Path to FASTA file

    Returns:
        dict: Dictionary mapping sequence names to sequences, in file order

    Raises:
        ValueError: if two records share a name

    Example:
        >>> sequences = read_fasta('seqs.fasta')
    """
    sequences = {}
    for name, seq in read_records(filename):
        if name in sequences:
            raise ValueError(f"{filename}: duplicate sequence name {name!r}")
        sequences[name] = seq
    return sequences


def read_pair(filename: str) -> Tuple[str, str]:
    """First two records of a FASTA file"""
    records = read_records(filename)
    if len(records) < 2:
        raise ValueError(f"{filename}: expected at least two sequences, found {len(records)}")
    return records[0][1], records[1][1]
