# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Reading a nucleotide sequence from FASTA and writing six frame
translations back out as a protein FASTA file.
"""

from .dna import clean_dna_sequence
from .logging import get_logger

logger = get_logger(__name__)


def parse_fasta_sequence(lines):
    """
    Concatenate the sequence lines of a FASTA file into a single cleaned,
    uppercase nucleotide string. Header lines starting with '>' are skipped,
    so a file with several records is read as one sequence.

    Parameters
    ----------
    lines : iterable of str

    Returns str
    """
    headers = []
    chunks = []
    for line in lines:
        line = line.strip()
        if not line:
            continue
        if line.startswith(">"):
            logger.debug("Skipping FASTA header '%s'", line)
            headers.append(line[1:])
        else:
            chunks.append(line)
    if len(headers) > 1:
        logger.warning(
            "Found %d FASTA records, concatenating them into one sequence",
            len(headers))
    return clean_dna_sequence("".join(chunks))


def read_fasta_sequence(path):
    """
    Read the nucleotide sequence from a FASTA file. Errors opening or
    reading the file are not caught.
    """
    with open(path, "r") as f:
        sequence = parse_fasta_sequence(f)
    logger.info("Read %d nt from %s", len(sequence), path)
    return sequence


def format_protein_fasta(frame_translations):
    """
    Returns FASTA text with one record per FrameTranslation, named by
    frame (e.g. '>Frame_1') with the whole amino acid sequence on the
    following line.
    """
    return "".join(
        ">%s\n%s\n" % (x.name, x.amino_acids)
        for x in frame_translations)


def write_protein_fasta(path, frame_translations):
    with open(path, "w") as f:
        f.write(format_protein_fasta(frame_translations))
    logger.info("Wrote %d protein sequences to %s", len(frame_translations), path)
