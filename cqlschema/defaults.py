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


from __future__ import annotations

from typing import Optional

from cqlschema.consts import CompressionParameterKey, CompressorClass
from cqlschema.types import CachingMode, CompactionStrategy


class TableDefaults:
    """System-wide default values for table properties.

    The compaction thresholds are also the bounds used when only one of
    min/max is given in a statement.
    """

    MIN_COMPACTION_THRESHOLD = 4
    MAX_COMPACTION_THRESHOLD = 32

    @classmethod
    def comment(cls) -> str:
        return ""

    @classmethod
    def read_repair_chance(cls) -> float:
        return 0.1

    @classmethod
    def dclocal_read_repair_chance(cls) -> float:
        return 0.0

    @classmethod
    def gc_grace_seconds(cls) -> int:
        """Ten days."""
        return 864000

    @classmethod
    def min_compaction_threshold(cls) -> int:
        return cls.MIN_COMPACTION_THRESHOLD

    @classmethod
    def max_compaction_threshold(cls) -> int:
        return cls.MAX_COMPACTION_THRESHOLD

    @classmethod
    def replicate_on_write(cls) -> bool:
        return True

    @classmethod
    def compaction_strategy_class(cls) -> str:
        return CompactionStrategy.DEFAULT

    @classmethod
    def caching(cls) -> str:
        return CachingMode.DEFAULT

    @classmethod
    def bloom_filter_fp_chance(cls) -> Optional[float]:
        """None lets the storage layer pick one per compaction strategy."""
        return None

    @classmethod
    def compression_parameters(cls) -> dict[str, str]:
        """Get the seed of a fresh compression parameters map.
        A new dict is returned on every call, callers may mutate it.
        """
        return {CompressionParameterKey.SSTABLE_COMPRESSION: CompressorClass.DEFAULT}
