import dataclasses

import pytest

from cqlschema import InvalidConfiguration, PropertyDefinitions, TableOptions
from cqlschema.consts import CompressionParameterKey, CompressorClass
from cqlschema.defaults import TableDefaults
from cqlschema.types import CachingMode, CompactionStrategy


def test_defaults_when_nothing_given():
    options = PropertyDefinitions().to_table_options()
    assert options == TableOptions(
        comment="",
        read_repair_chance=0.1,
        dclocal_read_repair_chance=0.0,
        gc_grace_seconds=864000,
        min_compaction_threshold=TableDefaults.MIN_COMPACTION_THRESHOLD,
        max_compaction_threshold=TableDefaults.MAX_COMPACTION_THRESHOLD,
        replicate_on_write=True,
        compaction_strategy_class=CompactionStrategy.SIZE_TIERED,
        caching=CachingMode.KEYS_ONLY,
        bloom_filter_fp_chance=None,
        compaction_strategy_options={},
        compression_parameters={CompressionParameterKey.SSTABLE_COMPRESSION: CompressorClass.SNAPPY},
    )


def test_given_values_are_typed():
    defs = PropertyDefinitions()
    defs.add_all({
        "comment": "user events",
        "read_repair_chance": "0.5",
        "dclocal_read_repair_chance": "0.25",
        "gc_grace_seconds": "3600",
        "min_compaction_threshold": "2",
        "max_compaction_threshold": "0",
        "replicate_on_write": "no",
        "compaction_strategy_class": CompactionStrategy.LEVELED,
        "caching": CachingMode.ALL,
        "bloom_filter_fp_chance": "0.01",
        "compaction_strategy_options:sstable_size_in_mb": "160",
        "compression_parameters:chunk_length_kb": "64",
    })
    options = defs.to_table_options()

    assert options.comment == "user events"
    assert options.read_repair_chance == 0.5
    assert options.dclocal_read_repair_chance == 0.25
    assert options.gc_grace_seconds == 3600
    assert options.min_compaction_threshold == 2
    assert options.max_compaction_threshold == 0
    assert options.replicate_on_write is False
    assert options.compaction_strategy_class == CompactionStrategy.LEVELED
    assert options.caching == CachingMode.ALL
    assert options.bloom_filter_fp_chance == 0.01
    assert options.compaction_strategy_options == {"sstable_size_in_mb": "160"}
    assert options.compression_parameters == {
        CompressionParameterKey.SSTABLE_COMPRESSION: CompressorClass.SNAPPY,
        "chunk_length_kb": "64",
    }


def test_maps_are_copied():
    defs = PropertyDefinitions()
    defs.add_property("compaction_strategy_options:bucket_low", "0.5")
    options = defs.to_table_options()
    defs.add_property("compaction_strategy_options:bucket_high", "1.5")
    assert options.compaction_strategy_options == {"bucket_low": "0.5"}


def test_options_are_frozen():
    options = PropertyDefinitions().to_table_options()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.comment = "changed"


def test_validation_runs_first():
    defs = PropertyDefinitions()
    defs.add_property("bogus_option", "x")
    with pytest.raises(InvalidConfiguration, match="bogus_option"):
        defs.to_table_options()


def test_default_compression_seed_is_fresh():
    seed = TableDefaults.compression_parameters()
    seed["chunk_length_kb"] = "64"
    assert TableDefaults.compression_parameters() == {
        CompressionParameterKey.SSTABLE_COMPRESSION: CompressorClass.DEFAULT,
    }
