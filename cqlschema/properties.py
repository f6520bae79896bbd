#! /usr/bin/python3
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

import logging
import re
from typing import Mapping, Optional

from sqlalchemy.sql.type_api import TypeEngine

from .consts import INT32_MAX, INT32_MIN, TRUE_LITERALS
from .defaults import TableDefaults
from .drivers.parsers import parse_type
from .exc import ConfigurationError, InvalidConfiguration
from .options import TableOptions
from .params import (
    CompactionOptionsPrefix,
    CompressionParametersPrefix,
    NamespaceSeparator,
    PropertyKey,
    PropertyKeywords,
)
from .types import TYPE_ALIASES


logger = logging.getLogger(__name__)


class PropertyDefinitions:
    """The WITH-clause properties of a single CREATE TABLE statement.

    Raw string pairs are routed into three buckets:
        - properties: general table properties, checked against the keyword allow-list.
        - compaction_strategy_options: `compaction_strategy_options:<name>` pairs,
          handed as-is to the compaction strategy.
        - compression_parameters: `compression_parameters:<name>` pairs,
          handed as-is to the compression codec. Always has a codec class entry.

    Ingestion never fails. Everything is checked by `validate()`, which must be
    called before the typed accessors are relied upon.
    """

    _INT_PATTERN = re.compile(r'[+-]?[0-9]+')
    _DOUBLE_PATTERN = re.compile(r'[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)')

    def __init__(self) -> None:
        self.properties: dict[str, str] = {}
        self.compaction_strategy_options: dict[str, str] = {}
        self.compression_parameters: dict[str, str] = TableDefaults.compression_parameters()

    @staticmethod
    def resolve_type(name: str) -> TypeEngine:
        """Resolve a column type token into a type object.

        Short CQL names (`int`, `text`, ...) are mapped to their canonical type
        names first. Any other name is passed on as-is, so custom types can be
        given by their qualified name.

        Raises:
            InvalidConfiguration: if the type registry can't resolve the name.
        """
        type_name = TYPE_ALIASES.get(name, name)
        try:
            resolved = parse_type(type_name)
        except ConfigurationError as e:
            raise InvalidConfiguration(str(e)) from e
        logger.debug(f"resolved type '{name}' as {type_name}: {resolved!r}")
        return resolved

    def add_property(self, name: str, value: str) -> None:
        """Map a keyword to the corresponding value."""
        prefix, sep, suffix = name.partition(NamespaceSeparator)
        if not sep or not suffix:
            # No option name after the separator: not a namespaced key.
            self.properties[name] = value
        elif prefix == CompactionOptionsPrefix:
            self.compaction_strategy_options[suffix] = value
            logger.debug(f"compaction strategy option: {suffix}={value}")
        elif prefix == CompressionParametersPrefix:
            self.compression_parameters[suffix] = value
            logger.debug(f"compression parameter: {suffix}={value}")
        else:
            # Unknown namespace: kept verbatim, validate() will reject it.
            self.properties[name] = value

    def add_all(self, property_map: Mapping[str, str]) -> None:
        for name, value in property_map.items():
            self.add_property(name, value)

    def validate(self) -> None:
        """Check the properties against the keyword tables and the compaction thresholds.

        Raises:
            InvalidConfiguration: on the first violation found.
        """
        # Must come before any typed read, the reads don't look at the allow-list.
        unknown = sorted(self.properties.keys() - PropertyKeywords.ALLOWED)
        if unknown:
            raise InvalidConfiguration(f"{unknown[0]} is not a valid keyword argument for CREATE TABLE")
        for obsolete in sorted(self.properties.keys() & PropertyKeywords.OBSOLETE):
            logger.warning("Ignoring obsolete property %s", obsolete)

        self._validate_compaction_thresholds()
        logger.debug(f"validated {self!r}")

    def _validate_compaction_thresholds(self) -> None:
        min_compaction = self.get_int(PropertyKey.MIN_COMPACTION_THRESHOLD, None)
        max_compaction = self.get_int(PropertyKey.MAX_COMPACTION_THRESHOLD, None)

        # A max threshold of 0 disables compaction, so it is never compared.
        if min_compaction is not None and max_compaction is not None:
            if min_compaction > max_compaction and max_compaction != 0:
                raise InvalidConfiguration(
                    f"{PropertyKey.MIN_COMPACTION_THRESHOLD} cannot be larger than "
                    f"{PropertyKey.MAX_COMPACTION_THRESHOLD}"
                )
        elif min_compaction is not None:
            if min_compaction > TableDefaults.MAX_COMPACTION_THRESHOLD:
                raise InvalidConfiguration(
                    f"{PropertyKey.MIN_COMPACTION_THRESHOLD} cannot be larger than "
                    f"{PropertyKey.MAX_COMPACTION_THRESHOLD}, (default {TableDefaults.MAX_COMPACTION_THRESHOLD})"
                )
        elif max_compaction is not None:
            if max_compaction < TableDefaults.MIN_COMPACTION_THRESHOLD and max_compaction != 0:
                raise InvalidConfiguration(
                    f"{PropertyKey.MAX_COMPACTION_THRESHOLD} cannot be smaller than "
                    f"{PropertyKey.MIN_COMPACTION_THRESHOLD}, (default {TableDefaults.MIN_COMPACTION_THRESHOLD})"
                )

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def get(self, name: str) -> Optional[str]:
        return self.properties.get(name)

    def get_string(self, key: str, default: Optional[str]) -> Optional[str]:
        value = self.properties.get(key)
        return value if value is not None else default

    def get_boolean(self, key: str, default: Optional[bool]) -> Optional[bool]:
        """Read a property as a boolean. Only '1', 'true' and 'yes' (any case) are True."""
        value = self.properties.get(key)
        if value is None:
            return default
        return value.lower() in TRUE_LITERALS

    def get_double(self, key: str, default: Optional[float]) -> Optional[float]:
        """Read a property as a decimal floating-point number.

        Surrounding whitespace is ignored. Besides decimal and exponent forms only
        `NaN` and `Infinity` are accepted.
        """
        value = self.properties.get(key)
        if value is None:
            return default
        if not self._DOUBLE_PATTERN.fullmatch(value.strip()):
            raise InvalidConfiguration(f'{value} not valid for "{key}"')
        return float(value)

    def get_int(self, key: str, default: Optional[int]) -> Optional[int]:
        """Read a property as a 32-bit decimal integer.

        Signs are allowed, whitespace and digit separators are not.
        """
        value = self.properties.get(key)
        if value is None:
            return default
        if not self._INT_PATTERN.fullmatch(value):
            raise InvalidConfiguration(f'{value} not valid for "{key}"')
        result = int(value)
        if not INT32_MIN <= result <= INT32_MAX:
            raise InvalidConfiguration(f'{value} not valid for "{key}"')
        return result

    def to_table_options(self) -> TableOptions:
        """Validate, then return the typed table options with defaults applied."""
        self.validate()
        return TableOptions.from_definitions(self)

    def __repr__(self) -> str:
        return (
            f"PropertyDefinitions({self.properties!r}, "
            f"compaction: {self.compaction_strategy_options!r}, "
            f"compression: {self.compression_parameters!r})"
        )
