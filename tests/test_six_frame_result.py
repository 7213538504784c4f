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

from unittest import mock

from sixsequences.six_frame_result import SixFrameResult
from .common import eq_


def test_six_frame_result_properties():
    result = SixFrameResult("ATGTTTTAA", source="test.fasta")
    eq_(len(result), 9)
    eq_(result.reverse_complement, "TTAAAACAT")
    eq_(result.amino_acid_sequences, ["MF*", "LKH", "CF", "*N", "VL", "KT"])
    eq_(result.frame_names[0], "Frame_1")
    eq_(result.frame_names[-1], "Frame_6")
    eq_(result.stop_codon_counts["Frame_1"], 1)
    eq_(result.stop_codon_counts["Frame_2"], 0)


def test_six_frame_result_frame_translations_cached():
    result = SixFrameResult("GATTACA")
    assert result.frame_translations is result.frame_translations


def test_six_frame_result_to_dict():
    d = SixFrameResult("ATGTTTTAA", source="test.fasta").to_dict()
    eq_(d["source"], "test.fasta")
    eq_(d["genetic_code"], "standard")
    eq_(d["sequence_length"], 9)
    eq_(d["Frame_2"], "LKH")
    eq_(list(d.keys())[-6:], ["Frame_%d" % i for i in range(1, 7)])


def test_six_frame_result_str():
    eq_(
        str(SixFrameResult("ACGT", source="x.fa")),
        "SixFrameResult(source=x.fa, sequence_length=4)")


def test_six_frame_result_computes_reverse_complement_once():
    result = SixFrameResult("ATGTTTTAA")
    with mock.patch(
            "sixsequences.frame_translation.reverse_complement_dna",
            side_effect=AssertionError("reverse complement recomputed")):
        eq_(result.reverse_complement, "TTAAAACAT")
        eq_(result.amino_acid_sequences[1], "LKH")
