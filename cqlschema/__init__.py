# Copyright 2021-present StarRocks, Inc. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https:#www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


from cqlschema.exc import ConfigurationError, InvalidConfiguration
from cqlschema.options import TableOptions
from cqlschema.properties import PropertyDefinitions

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidConfiguration",
    "PropertyDefinitions",
    "TableOptions",
]
