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

from typing import Final


NamespaceSeparator: Final[str] = ':'
"""Joins a namespace prefix to an option name, e.g. `compression_parameters:chunk_length_kb`."""

CompactionOptionsPrefix: Final[str] = 'compaction_strategy_options'
"""Prefix for options handed to the compaction strategy."""

CompressionParametersPrefix: Final[str] = 'compression_parameters'
"""Prefix for options handed to the compression codec."""


class PropertyKey:
    """Centralizes the WITH-clause property names of a CREATE TABLE statement."""

    COMMENT = 'comment'
    READ_REPAIR_CHANCE = 'read_repair_chance'
    DCLOCAL_READ_REPAIR_CHANCE = 'dclocal_read_repair_chance'
    GC_GRACE_SECONDS = 'gc_grace_seconds'
    MIN_COMPACTION_THRESHOLD = 'min_compaction_threshold'
    MAX_COMPACTION_THRESHOLD = 'max_compaction_threshold'
    REPLICATE_ON_WRITE = 'replicate_on_write'
    COMPACTION_STRATEGY_CLASS = 'compaction_strategy_class'
    CACHING = 'caching'
    BF_FP_CHANCE = 'bloom_filter_fp_chance'


PropertyKey.ALL = frozenset(
    v for k, v in vars(PropertyKey).items() if not callable(v) and not k.startswith("__")
)


class PropertyKeywords:
    """Keyword tables used by validation.

    - RECOGNIZED: properties that are currently understood.
    - OBSOLETE: properties still accepted for old statements, but ignored with a warning.
    - ALLOWED: the union of both, anything else is rejected.
    """

    RECOGNIZED: frozenset[str] = PropertyKey.ALL
    OBSOLETE: frozenset[str] = frozenset()
    ALLOWED: frozenset[str] = RECOGNIZED | OBSOLETE
