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

import dataclasses
from typing import TYPE_CHECKING, Optional

from cqlschema.defaults import TableDefaults
from cqlschema.params import PropertyKey

if TYPE_CHECKING:
    from cqlschema.properties import PropertyDefinitions


@dataclasses.dataclass(kw_only=True, frozen=True)
class TableOptions:
    """Typed table options read from validated property definitions.

    Attributes not given in the statement carry the `TableDefaults` value.
    The two namespaced maps are copies of the raw strings, the compaction
    strategy and compression codec interpret them.
    """
    comment: str
    read_repair_chance: float
    dclocal_read_repair_chance: float
    gc_grace_seconds: int
    min_compaction_threshold: int
    max_compaction_threshold: int
    replicate_on_write: bool
    compaction_strategy_class: str
    caching: str
    bloom_filter_fp_chance: Optional[float] = None
    compaction_strategy_options: dict[str, str] = dataclasses.field(default_factory=dict)
    compression_parameters: dict[str, str] = dataclasses.field(default_factory=TableDefaults.compression_parameters)

    @classmethod
    def from_definitions(cls, defs: PropertyDefinitions) -> TableOptions:
        """Build options from definitions that have already passed `validate()`."""
        return cls(
            comment=defs.get_string(PropertyKey.COMMENT, TableDefaults.comment()),
            read_repair_chance=defs.get_double(PropertyKey.READ_REPAIR_CHANCE, TableDefaults.read_repair_chance()),
            dclocal_read_repair_chance=defs.get_double(
                PropertyKey.DCLOCAL_READ_REPAIR_CHANCE, TableDefaults.dclocal_read_repair_chance()
            ),
            gc_grace_seconds=defs.get_int(PropertyKey.GC_GRACE_SECONDS, TableDefaults.gc_grace_seconds()),
            min_compaction_threshold=defs.get_int(
                PropertyKey.MIN_COMPACTION_THRESHOLD, TableDefaults.min_compaction_threshold()
            ),
            max_compaction_threshold=defs.get_int(
                PropertyKey.MAX_COMPACTION_THRESHOLD, TableDefaults.max_compaction_threshold()
            ),
            replicate_on_write=defs.get_boolean(PropertyKey.REPLICATE_ON_WRITE, TableDefaults.replicate_on_write()),
            compaction_strategy_class=defs.get_string(
                PropertyKey.COMPACTION_STRATEGY_CLASS, TableDefaults.compaction_strategy_class()
            ),
            caching=defs.get_string(PropertyKey.CACHING, TableDefaults.caching()),
            bloom_filter_fp_chance=defs.get_double(PropertyKey.BF_FP_CHANCE, TableDefaults.bloom_filter_fp_chance()),
            compaction_strategy_options=dict(defs.compaction_strategy_options),
            compression_parameters=dict(defs.compression_parameters),
        )
