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
Translation of a DNA sequence in all six reading frames: three offsets
on the forward strand and three on its reverse complement.
"""

from .dna import reverse_complement_dna
from .genetic_code import standard_genetic_code
from .value_object import ValueObject

FORWARD_STRAND = "+"
REVERSE_STRAND = "-"

# frames are numbered 1-6 in this order, interleaving the two strands
# at each offset with the forward strand first
READING_FRAMES = [
    (strand, offset)
    for offset in (0, 1, 2)
    for strand in (FORWARD_STRAND, REVERSE_STRAND)
]


class FrameTranslation(ValueObject):
    """
    Amino acid sequence obtained by translating one strand of a DNA
    sequence starting at a particular offset.
    """
    __slots__ = [
        # 1-based position of this frame in the six frame output
        "frame_number",
        # '+' for the input sequence, '-' for its reverse complement
        "strand",
        # index of the first nucleotide of the first codon
        "offset",
        "amino_acids",
    ]

    @property
    def name(self):
        return "Frame_%d" % self.frame_number

    @property
    def num_stop_codons(self):
        return self.amino_acids.count("*")

    def __len__(self):
        return len(self.amino_acids)


def six_frame_translations(
        seq,
        genetic_code=standard_genetic_code,
        reverse_complement=None):
    """
    Translate a cleaned, uppercase DNA sequence in all six reading frames.

    Parameters
    ----------
    seq : str

    genetic_code : GeneticCode

    reverse_complement : str or None
        Reverse complement of `seq`, if the caller already has it.

    Returns list of six FrameTranslation objects ordered by frame number.
    """
    if reverse_complement is None:
        reverse_complement = reverse_complement_dna(seq)
    strands = {
        FORWARD_STRAND: seq,
        REVERSE_STRAND: reverse_complement,
    }
    return [
        FrameTranslation(
            frame_number=i + 1,
            strand=strand,
            offset=offset,
            amino_acids=genetic_code.translate_frame(strands[strand], offset))
        for i, (strand, offset) in enumerate(READING_FRAMES)
    ]


def six_frame_translate(seq):
    """
    Returns the amino acid strings for frames 1 through 6 of a DNA sequence.
    """
    return [
        frame_translation.amino_acids
        for frame_translation in six_frame_translations(seq)
    ]
