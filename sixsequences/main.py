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
Read a FASTA file, translate its sequence in all six reading frames and
write the protein FASTA file and HTML report.
"""

from collections import OrderedDict

from .default_parameters import (
    DEFAULT_OUTPUT_PREFIX,
    FASTA_OUTPUT_SUFFIX,
    HTML_OUTPUT_SUFFIX,
)
from .fasta import read_fasta_sequence, write_protein_fasta
from .html_report import write_html_report
from .logging import get_logger
from .six_frame_result import SixFrameResult

logger = get_logger(__name__)


def output_paths(output_prefix=DEFAULT_OUTPUT_PREFIX):
    """
    Returns OrderedDict mapping each kind of output ("fasta", "html") to
    the path it gets written to.
    """
    return OrderedDict([
        ("fasta", output_prefix + FASTA_OUTPUT_SUFFIX),
        ("html", output_prefix + HTML_OUTPUT_SUFFIX),
    ])


def run_six_frame_translation(
        input_path,
        output_prefix=DEFAULT_OUTPUT_PREFIX,
        write_fasta=True,
        write_html=True):
    """
    Parameters
    ----------
    input_path : str
        FASTA file containing a nucleotide sequence.

    output_prefix : str
        Prefix for the names of the generated files.

    write_fasta : bool

    write_html : bool

    Returns SixFrameResult
    """
    sequence = read_fasta_sequence(input_path)
    logger.info("Sequence length: %d bp", len(sequence))
    result = SixFrameResult(sequence, source=input_path)
    paths = output_paths(output_prefix)
    if write_fasta:
        write_protein_fasta(paths["fasta"], result.frame_translations)
    if write_html:
        write_html_report(paths["html"], sequence, result.frame_translations)
    return result
