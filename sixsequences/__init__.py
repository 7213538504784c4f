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

__version__ = "0.1.0"

from .dna import reverse_complement_dna, clean_dna_sequence
from .frame_translation import (
    FrameTranslation,
    six_frame_translate,
    six_frame_translations,
)
from .genetic_code import (
    GeneticCode,
    codon_to_amino_acid,
    standard_genetic_code,
    translate_frame,
)
from .main import run_six_frame_translation
from .six_frame_result import SixFrameResult

__all__ = [
    "clean_dna_sequence",
    "codon_to_amino_acid",
    "reverse_complement_dna",
    "run_six_frame_translation",
    "six_frame_translate",
    "six_frame_translations",
    "standard_genetic_code",
    "translate_frame",
    "FrameTranslation",
    "GeneticCode",
    "SixFrameResult",
]
