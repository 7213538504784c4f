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

import logging
import logging.config
from os.path import dirname, join

logging_config_path = join(dirname(__file__), "logging.conf")


def configure_logging(config_path=logging_config_path):
    """
    Load logging handlers and formats from a config file. Called by the
    commandline entry points; importing the library leaves logging alone.
    """
    logging.config.fileConfig(config_path, disable_existing_loggers=False)


def get_logger(name, level=None):
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
