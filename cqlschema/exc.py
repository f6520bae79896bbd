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


from sqlalchemy import exc


class InvalidConfiguration(exc.InvalidRequestError):
    """A table definition carries a property or type that can't be accepted.

    The statement that produced it should be rejected as a whole.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConfigurationError(exc.ArgumentError):
    """The type registry could not resolve a type expression."""

    def __init__(self, message: str, type_str: str | None = None):
        super().__init__(message)
        self.type_str = type_str
