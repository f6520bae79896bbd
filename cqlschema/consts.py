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


"""Shared constants for table property definitions.

String keys and literal values used by more than one module live here, so
callsites don't repeat typo-prone literals.
"""

from __future__ import annotations

from typing import Final


class CompressionParameterKey:
    """Keys found in the compression parameters map."""

    SSTABLE_COMPRESSION: Final[str] = "sstable_compression"


class CompressorClass:
    """Compression codec class names understood by the codec factory."""

    SNAPPY: Final[str] = "org.apache.cassandra.io.compress.SnappyCompressor"
    DEFLATE: Final[str] = "org.apache.cassandra.io.compress.DeflateCompressor"

    DEFAULT: Final[str] = SNAPPY


MARSHAL_PACKAGE: Final[str] = "org.apache.cassandra.db.marshal"
"""Package of the built-in marshal types; qualified names under it resolve to the builtin registry."""

TRUE_LITERALS: Final[frozenset[str]] = frozenset({"1", "true", "yes"})
"""Lower-cased strings read as True by boolean accessors. Anything else is False."""

INT32_MIN: Final[int] = -(2 ** 31)
INT32_MAX: Final[int] = 2 ** 31 - 1
