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

import pandas as pd

VALID_ELEMENT_TYPES = (int, str, bytes, float, bool)


class DataFrameBuilder(object):
    """
    Helper class for constructing a DataFrame from the fields of
    ValueObject instances, one row per element.
    """
    def __init__(self, element_class, extra_column_fns={}):
        """
        Parameters
        ----------
        element_class : type
            Expected to a have a class-member named '_fields' which is a list
            of field names.

        extra_column_fns : dict
            Dictionary mapping column names to functions which take an
            element and return a single value for each row.
        """
        self.element_class = element_class
        self.field_names = list(element_class._fields)

        columns_list = [(name, []) for name in self.field_names]

        self.extra_column_fns = extra_column_fns
        for column_name in self.extra_column_fns:
            if column_name in self.field_names:
                raise ValueError(
                    "Extra column '%s' has the same name as a field of %s" % (
                        column_name,
                        element_class.__name__))
            columns_list.append((column_name, []))

        self.columns_dict = OrderedDict(columns_list)

    def add(self, element):
        if not isinstance(element, self.element_class):
            raise TypeError("Expected %s but got %s : %s" % (
                self.element_class.__name__,
                element,
                type(element)))

        for name in self.field_names:
            value = getattr(element, name)
            if not isinstance(value, VALID_ELEMENT_TYPES):
                raise ValueError(
                    "Field '%s' : %s is not a scalar or string" % (
                        name,
                        type(value)))
            self.columns_dict[name].append(value)

        for column_name, fn in self.extra_column_fns.items():
            self.columns_dict[column_name].append(fn(element))

    def add_many(self, elements):
        for element in elements:
            self.add(element)

    def _check_column_lengths(self):
        """
        Make sure columns are of the same length or else DataFrame construction
        will fail.
        """
        column_lengths_dict = {
            name: len(xs)
            for (name, xs)
            in self.columns_dict.items()
        }
        unique_column_lengths = set(column_lengths_dict.values())
        if len(unique_column_lengths) > 1:
            raise ValueError(
                "Mismatch between lengths of columns: %s" % (column_lengths_dict,))

    def to_dataframe(self):
        self._check_column_lengths()
        return pd.DataFrame(self.columns_dict)
