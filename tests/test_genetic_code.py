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

from itertools import product

import pytest

from sixsequences.genetic_code import (
    GeneticCode,
    codon_to_amino_acid,
    standard_genetic_code,
    translate_frame,
)
from .common import eq_


def test_standard_code_has_64_codons():
    eq_(len(standard_genetic_code.codon_table), 64)


def test_every_nucleotide_codon_translates():
    for bases in product("ACGT", repeat=3):
        aa = codon_to_amino_acid("".join(bases))
        eq_(len(aa), 1)
        assert aa != "X", "".join(bases)


def test_amino_acid_alphabet():
    eq_(
        set(standard_genetic_code.codon_table.values()),
        set("ACDEFGHIKLMNPQRSTVWY*"))


def test_stop_codons():
    for codon in ["TAA", "TAG", "TGA"]:
        eq_(codon_to_amino_acid(codon), "*")


def test_selected_codons():
    eq_(codon_to_amino_acid("ATG"), "M")
    eq_(codon_to_amino_acid("TGG"), "W")
    eq_(codon_to_amino_acid("AGA"), "R")
    eq_(codon_to_amino_acid("AGC"), "S")
    eq_(codon_to_amino_acid("CTG"), "L")
    eq_(codon_to_amino_acid("GGG"), "G")


def test_malformed_codons_translate_to_X():
    for codon in ["ZZZ", "ATZ", "NNN", "atg", "AT", "ATGA", ""]:
        eq_(codon_to_amino_acid(codon), "X")


def test_translate_frame_keeps_stop_codons():
    eq_(translate_frame("ATGTTTTAA", 0), "MF*")
    eq_(translate_frame("TAAATG", 0), "*M")


def test_translate_frame_drops_trailing_bases():
    eq_(translate_frame("ATGA", 0), "M")
    eq_(translate_frame("ATGAT", 0), "M")


def test_translate_frame_offsets():
    eq_(translate_frame("ATGTTTTAA", 1), "CF")
    eq_(translate_frame("ATGTTTTAA", 2), "VL")


def test_translate_frame_length():
    seq = "ATGCGTAGCTAGCTAGGCTA"
    for n in range(len(seq) + 1):
        for offset in (0, 1, 2):
            expected = max(0, (n - offset) // 3)
            eq_(len(translate_frame(seq[:n], offset)), expected)


def test_translate_frame_unknown_codon():
    eq_(translate_frame("ATGZZZ", 0), "MX")
    eq_(translate_frame("ATGNTT", 0), "MX")


def test_translate_frame_invalid_offset():
    with pytest.raises(ValueError):
        translate_frame("ATGATG", 3)
    with pytest.raises(ValueError):
        translate_frame("ATGATG", -1)


def test_genetic_code_adds_missing_stop_codons():
    table = dict(standard_genetic_code.codon_table)
    del table["TGA"]
    code = GeneticCode(
        name="test",
        start_codons={"ATG"},
        stop_codons={"TAA", "TAG", "TGA"},
        codon_table=table)
    eq_(code.codon_to_amino_acid("TGA"), "*")


def test_genetic_code_rejects_incomplete_table():
    with pytest.raises(ValueError):
        GeneticCode(
            name="partial",
            start_codons={"ATG"},
            stop_codons={"TAA", "TAG", "TGA"},
            codon_table={"ATG": "M", "TTT": "F", "TTC": "F"})


def test_genetic_code_rejects_stop_codon_with_amino_acid():
    table = dict(standard_genetic_code.codon_table)
    table["TAA"] = "Q"
    with pytest.raises(ValueError):
        GeneticCode(
            name="bad-stop",
            start_codons={"ATG"},
            stop_codons={"TAA", "TAG", "TGA"},
            codon_table=table)


def test_genetic_code_rejects_unlisted_stop():
    table = dict(standard_genetic_code.codon_table)
    table["TGG"] = "*"
    with pytest.raises(ValueError):
        GeneticCode(
            name="bad-stop",
            start_codons={"ATG"},
            stop_codons={"TAA", "TAG", "TGA"},
            codon_table=table)


def test_genetic_code_rejects_missing_start_codon():
    table = dict(standard_genetic_code.codon_table)
    with pytest.raises(ValueError):
        GeneticCode(
            name="bad-start",
            start_codons={"NNN"},
            stop_codons={"TAA", "TAG", "TGA"},
            codon_table=table)
