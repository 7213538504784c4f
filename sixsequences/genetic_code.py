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
GeneticCode objects contain the rules for translating DNA into a protein
sequence: the set of start and stop codons, as well as which amino acid
each DNA triplet is translated into.
"""

STOP_AMINO_ACID = "*"

# amino acid emitted for any codon which isn't in the table, e.g. one
# containing an 'N' or some other non-nucleotide character
UNKNOWN_AMINO_ACID = "X"

VALID_FRAME_OFFSETS = (0, 1, 2)


class GeneticCode(object):
    """
    Represents a translation table from DNA triplets to amino acids.
    Instances are treated as immutable once constructed.
    """
    def __init__(self, name, start_codons, stop_codons, codon_table):
        self.name = name
        self.start_codons = frozenset(start_codons)
        self.stop_codons = frozenset(stop_codons)
        self.codon_table = dict(codon_table)
        self._check_codons()

    def __str__(self):
        return "GeneticCode(name='%s')" % (self.name,)

    def __repr__(self):
        return str(self)

    def _check_codons(self):
        """
        If codon table is missing stop codons, then add them.
        """
        for stop_codon in self.stop_codons:
            if stop_codon in self.codon_table:
                if self.codon_table[stop_codon] != STOP_AMINO_ACID:
                    raise ValueError(
                        ("Codon '%s' found in stop_codons, but codon table "
                         "translates it to '%s'") % (
                            stop_codon,
                            self.codon_table[stop_codon]))
            else:
                self.codon_table[stop_codon] = STOP_AMINO_ACID

        for start_codon in self.start_codons:
            if start_codon not in self.codon_table:
                raise ValueError(
                    "Start codon '%s' missing from codon table" % (
                        start_codon,))

        for codon, amino_acid in self.codon_table.items():
            if amino_acid == STOP_AMINO_ACID and codon not in self.stop_codons:
                raise ValueError(
                    "Non-stop codon '%s' can't translate to '*'" % (
                        codon,))

        if len(self.codon_table) != 64:
            raise ValueError(
                "Expected 64 codons but found %d in codon table" % (
                    len(self.codon_table),))

    def codon_to_amino_acid(self, codon):
        """
        Returns the one-letter amino acid code for a DNA triplet, '*' for
        stop codons and 'X' for anything not in the codon table.
        """
        return self.codon_table.get(codon, UNKNOWN_AMINO_ACID)

    def translate_frame(self, seq, offset=0):
        """
        Translate every complete codon of a DNA sequence starting at the
        given offset. Stop codons are kept in the output as '*' and
        translation continues past them.

        Parameters
        ----------
        seq : str
            Uppercase DNA sequence.

        offset : int
            Index of the first nucleotide of the first codon, one of 0, 1, 2.

        Returns str
        """
        if offset not in VALID_FRAME_OFFSETS:
            raise ValueError(
                "Invalid reading frame offset %r, expected one of %s" % (
                    offset,
                    VALID_FRAME_OFFSETS))
        # the 1 or 2 nucleotides dangling at the end of the sequence
        # don't make a codon and are dropped
        end_idx = offset + 3 * ((len(seq) - offset) // 3)
        codon_table = self.codon_table
        return "".join(
            codon_table.get(seq[i:i + 3], UNKNOWN_AMINO_ACID)
            for i in range(offset, end_idx, 3))


standard_genetic_code = GeneticCode(
    name="standard",
    start_codons={'ATG'},
    stop_codons={'TAA', 'TAG', 'TGA'},
    codon_table={
        'TTT': 'F', 'TTC': 'F', 'TTA': 'L', 'TTG': 'L',
        'TCT': 'S', 'TCC': 'S', 'TCA': 'S', 'TCG': 'S',
        'TAT': 'Y', 'TAC': 'Y', 'TAA': '*', 'TAG': '*',
        'TGT': 'C', 'TGC': 'C', 'TGA': '*', 'TGG': 'W',
        'CTT': 'L', 'CTC': 'L', 'CTA': 'L', 'CTG': 'L',
        'CCT': 'P', 'CCC': 'P', 'CCA': 'P', 'CCG': 'P',
        'CAT': 'H', 'CAC': 'H', 'CAA': 'Q', 'CAG': 'Q',
        'CGT': 'R', 'CGC': 'R', 'CGA': 'R', 'CGG': 'R',
        'ATT': 'I', 'ATC': 'I', 'ATA': 'I', 'ATG': 'M',
        'ACT': 'T', 'ACC': 'T', 'ACA': 'T', 'ACG': 'T',
        'AAT': 'N', 'AAC': 'N', 'AAA': 'K', 'AAG': 'K',
        'AGT': 'S', 'AGC': 'S', 'AGA': 'R', 'AGG': 'R',
        'GTT': 'V', 'GTC': 'V', 'GTA': 'V', 'GTG': 'V',
        'GCT': 'A', 'GCC': 'A', 'GCA': 'A', 'GCG': 'A',
        'GAT': 'D', 'GAC': 'D', 'GAA': 'E', 'GAG': 'E',
        'GGT': 'G', 'GGC': 'G', 'GGA': 'G', 'GGG': 'G'
    }
)


def codon_to_amino_acid(codon):
    """
    Translate a single codon using the standard genetic code.
    """
    return standard_genetic_code.codon_to_amino_acid(codon)


def translate_frame(seq, offset=0):
    """
    Translate a DNA sequence in the reading frame starting at `offset`
    using the standard genetic code.
    """
    return standard_genetic_code.translate_frame(seq, offset)
