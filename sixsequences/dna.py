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
Basic DNA string operations, kept in plain Python strings to avoid
depending on a bigger library such as BioPython.
"""

dna_complement_dictionary = {
    "A": "T",
    "T": "A",
    "C": "G",
    "G": "C",
}

UNKNOWN_NUCLEOTIDE = "N"


def complement_dna(seq):
    """
    Convert every A->T, T->A, C->G, G->C in a DNA sequence. Any other
    character (including lowercase bases) becomes 'N'.

    Parameters
    ----------
    seq : str

    Returns str
    """
    return "".join(
        dna_complement_dictionary.get(nt, UNKNOWN_NUCLEOTIDE)
        for nt in seq)


def reverse_complement_dna(seq):
    """
    Reverse complement of a DNA sequence

    Parameters
    ----------
    seq : str

    Returns str
    """
    return complement_dna(seq)[::-1]


def clean_dna_sequence(seq):
    """
    Drop whitespace, digits and punctuation from a nucleotide string and
    uppercase what remains.
    """
    return "".join(c for c in seq if c.isascii() and c.isalpha()).upper()
