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
Translate the sequence in a FASTA file in all six reading frames.
"""

import sys

from ..dataframe_helpers import (
    frame_table_columns,
    frame_translations_to_dataframe,
)
from ..logging import configure_logging, get_logger
from ..main import output_paths, run_six_frame_translation
from .output_args import check_output_args, write_dataframe
from .six_frame_args import make_six_frame_arg_parser

logger = get_logger(__name__)

parser = make_six_frame_arg_parser(prog="sixsequences")


def run(args=None):
    if args is None:
        args = sys.argv[1:]
    args = parser.parse_args(args)
    configure_logging()
    logger.info(args)
    check_output_args(args, frame_table_columns())
    result = run_six_frame_translation(
        input_path=args.input,
        output_prefix=args.out_prefix,
        write_html=not args.skip_html)
    for kind, path in output_paths(args.out_prefix).items():
        if kind == "html" and args.skip_html:
            continue
        logger.info("Generated %s output: %s", kind, path)
    logger.info("Stop codons per frame: %s", dict(result.stop_codon_counts))
    logger.debug(result.to_dict())
    if args.output_csv:
        df = frame_translations_to_dataframe(result.frame_translations)
        logger.info(df)
        write_dataframe(df, args)
