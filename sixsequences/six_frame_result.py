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
SixFrameResult collects everything derived from a single input sequence:
its reverse complement and the translations of all six reading frames.
"""

from collections import OrderedDict

from cached_property import cached_property

from .dna import reverse_complement_dna
from .frame_translation import six_frame_translations
from .genetic_code import standard_genetic_code


class SixFrameResult(object):
    """
    Lazily computed translations of one DNA sequence. The sequence is
    expected to already be cleaned and uppercased.
    """
    def __init__(self, sequence, source=None, genetic_code=standard_genetic_code):
        """
        Parameters
        ----------
        sequence : str
            Uppercase DNA sequence.

        source : str or None
            Where the sequence came from, usually a FASTA path.

        genetic_code : GeneticCode
        """
        self.sequence = sequence
        self.source = source
        self.genetic_code = genetic_code

    def __str__(self):
        return "%s(source=%s, sequence_length=%d)" % (
            self.__class__.__name__,
            self.source,
            len(self.sequence))

    def __repr__(self):
        return str(self)

    def __len__(self):
        return len(self.sequence)

    @cached_property
    def reverse_complement(self):
        return reverse_complement_dna(self.sequence)

    @cached_property
    def frame_translations(self):
        """
        List of six FrameTranslation objects.
        """
        return six_frame_translations(
            self.sequence,
            genetic_code=self.genetic_code,
            reverse_complement=self.reverse_complement)

    @cached_property
    def amino_acid_sequences(self):
        return [x.amino_acids for x in self.frame_translations]

    @cached_property
    def frame_names(self):
        return [x.name for x in self.frame_translations]

    @cached_property
    def stop_codon_counts(self):
        return OrderedDict(
            (x.name, x.num_stop_codons)
            for x in self.frame_translations)

    def to_dict(self):
        d = OrderedDict([
            ("source", self.source),
            ("genetic_code", self.genetic_code.name),
            ("sequence_length", len(self.sequence)),
        ])
        for frame_translation in self.frame_translations:
            d[frame_translation.name] = frame_translation.amino_acids
        return d
