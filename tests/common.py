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
Helpers shared by the test modules.
"""

from os.path import dirname, join


def eq_(x, y, msg=None):
    """
    Shim for the nose.tools.eq_ assertion.
    """
    if msg is None:
        assert x == y, "%r != %r" % (x, y)
    else:
        assert x == y, msg


def data_path(path):
    """
    Return the absolute path to a file in the tests/data directory.
    """
    return join(dirname(__file__), "data", path)
