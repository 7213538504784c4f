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

from collections import OrderedDict

from .dataframe_builder import DataFrameBuilder
from .frame_translation import FrameTranslation

frame_table_extra_column_fns = OrderedDict([
    ("name", lambda x: x.name),
    ("length", lambda x: len(x)),
    ("num_stop_codons", lambda x: x.num_stop_codons),
])


def frame_table_columns():
    """
    Names of the columns produced by frame_translations_to_dataframe,
    in order.
    """
    return list(FrameTranslation._fields) + list(frame_table_extra_column_fns)


def frame_translations_to_dataframe(frame_translations):
    """
    Creates a DataFrame with one row per reading frame.

    Parameters
    ----------
    frame_translations : list of FrameTranslation

    Returns
    -------
    pandas.DataFrame
    """
    builder = DataFrameBuilder(
        FrameTranslation,
        extra_column_fns=frame_table_extra_column_fns)
    builder.add_many(frame_translations)
    return builder.to_dataframe()
