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
Optional tabular output of per-frame translations, shared by commands
which produce FrameTranslation objects.
"""


def add_output_args(
        parser,
        filename=None,
        description="CSV file with one row per reading frame"):
    output_group = parser.add_argument_group("Tabular output")
    output_group.add_argument(
        "--output-csv",
        default=filename,
        help=description)
    output_group.add_argument(
        "--output-columns",
        default=None,
        nargs="+",
        help="Subset of columns to write")
    return parser


def check_output_args(args, valid_columns):
    """
    Validate the tabular output options before any work is done, so a bad
    column name doesn't leave other output files half written.
    """
    if not args.output_columns:
        return
    if not args.output_csv:
        raise ValueError("--output-columns requires --output-csv")
    for col in args.output_columns:
        if col not in valid_columns:
            raise ValueError("Column not found '%s', valid options: %s" % (
                col, list(valid_columns)))


def write_dataframe(df, args):
    if not args.output_csv:
        raise ValueError("Missing path for --output-csv")
    check_output_args(args, list(df.columns))
    if args.output_columns:
        df = df[args.output_columns]
    df.to_csv(args.output_csv, index=False)
