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
Commandline arguments for reading a FASTA file and choosing where the
six frame translations get written.
"""

import argparse

from .. import __version__
from ..default_parameters import DEFAULT_OUTPUT_PREFIX
from .output_args import add_output_args


def add_input_args(parser):
    input_group = parser.add_argument_group("Input")
    input_group.add_argument(
        "--input", "-i",
        required=True,
        help="FASTA file containing a nucleotide sequence")
    return input_group


def add_prefix_args(parser):
    prefix_group = parser.add_argument_group("Output files")
    prefix_group.add_argument(
        "--out-prefix", "-p",
        default=DEFAULT_OUTPUT_PREFIX,
        help=(
            "Prefix for generated files: <prefix>_sixframes.fasta and "
            "<prefix>_report.html (default: %(default)s)"))
    prefix_group.add_argument(
        "--skip-html",
        action="store_true",
        default=False,
        help="Don't write the HTML report")
    return prefix_group


def make_six_frame_arg_parser(**kwargs):
    """
    Parameters
    ----------
    **kwargs : dict
        Passed directly to argparse.ArgumentParser

    Creates argparse.ArgumentParser instance with all of the options
    needed to translate a FASTA sequence in six reading frames.
    """
    kwargs.setdefault(
        "description",
        "Translate a DNA/RNA sequence into proteins across six reading "
        "frames, producing a protein FASTA file and an HTML report.")
    parser = argparse.ArgumentParser(**kwargs)
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + __version__)
    add_input_args(parser)
    add_prefix_args(parser)
    add_output_args(parser)
    return parser
