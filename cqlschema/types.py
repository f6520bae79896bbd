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


from types import MappingProxyType


class CachingMode:
    """Row/key cache modes accepted by the `caching` property."""

    ALL = "ALL"
    KEYS_ONLY = "KEYS_ONLY"
    ROWS_ONLY = "ROWS_ONLY"
    NONE = "NONE"

    DEFAULT = KEYS_ONLY


class CompactionStrategy:
    """Compaction strategy class names known to the compaction-strategy factory."""

    SIZE_TIERED = "SizeTieredCompactionStrategy"
    LEVELED = "LeveledCompactionStrategy"

    DEFAULT = SIZE_TIERED


class MarshalTypeName:
    """Canonical names of the builtin marshal types."""

    ASCII = "AsciiType"
    LONG = "LongType"
    BYTES = "BytesType"
    BOOLEAN = "BooleanType"
    COUNTER = "CounterColumnType"
    DECIMAL = "DecimalType"
    DOUBLE = "DoubleType"
    FLOAT = "FloatType"
    INT32 = "Int32Type"
    UTF8 = "UTF8Type"
    DATE = "DateType"
    UUID = "UUIDType"
    TIMEUUID = "TimeUUIDType"
    LEXICAL_UUID = "LexicalUUIDType"
    INTEGER = "IntegerType"

    # Parameterised
    REVERSED = "ReversedType"
    COMPOSITE = "CompositeType"


# Maps CQL short type names to the respective canonical marshal type names.
# Read-only, names missing here are passed to the type registry as-is.
TYPE_ALIASES = MappingProxyType({
    "ascii": MarshalTypeName.ASCII,
    "bigint": MarshalTypeName.LONG,
    "blob": MarshalTypeName.BYTES,
    "boolean": MarshalTypeName.BOOLEAN,
    "counter": MarshalTypeName.COUNTER,
    "decimal": MarshalTypeName.DECIMAL,
    "double": MarshalTypeName.DOUBLE,
    "float": MarshalTypeName.FLOAT,
    "int": MarshalTypeName.INT32,
    "text": MarshalTypeName.UTF8,
    "timestamp": MarshalTypeName.DATE,
    "uuid": MarshalTypeName.UUID,
    "varchar": MarshalTypeName.UTF8,
    "varint": MarshalTypeName.INTEGER,
})
