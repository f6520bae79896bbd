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


from typing import Any, Optional, Type, Tuple, ClassVar
from types import MappingProxyType

from sqlalchemy.sql import sqltypes
from sqlalchemy.sql.type_api import TypeEngine

from cqlschema.types import MarshalTypeName


class AsciiType(sqltypes.String):
    marshal_name: ClassVar[str] = MarshalTypeName.ASCII


class UTF8Type(sqltypes.Unicode):
    marshal_name: ClassVar[str] = MarshalTypeName.UTF8


class BytesType(sqltypes.LargeBinary):
    marshal_name: ClassVar[str] = MarshalTypeName.BYTES


class BooleanType(sqltypes.Boolean):
    marshal_name: ClassVar[str] = MarshalTypeName.BOOLEAN


class Int32Type(sqltypes.Integer):
    marshal_name: ClassVar[str] = MarshalTypeName.INT32


class LongType(sqltypes.BigInteger):
    marshal_name: ClassVar[str] = MarshalTypeName.LONG


class CounterColumnType(sqltypes.BigInteger):
    marshal_name: ClassVar[str] = MarshalTypeName.COUNTER


class IntegerType(sqltypes.Integer):
    """Arbitrary-precision integer (varint)."""
    marshal_name: ClassVar[str] = MarshalTypeName.INTEGER


class DecimalType(sqltypes.Numeric):
    marshal_name: ClassVar[str] = MarshalTypeName.DECIMAL


class FloatType(sqltypes.Float):
    marshal_name: ClassVar[str] = MarshalTypeName.FLOAT


class DoubleType(sqltypes.Double):
    marshal_name: ClassVar[str] = MarshalTypeName.DOUBLE


class DateType(sqltypes.DateTime):
    marshal_name: ClassVar[str] = MarshalTypeName.DATE


class UUIDType(sqltypes.Uuid):
    marshal_name: ClassVar[str] = MarshalTypeName.UUID


class TimeUUIDType(UUIDType):
    marshal_name: ClassVar[str] = MarshalTypeName.TIMEUUID


class LexicalUUIDType(UUIDType):
    marshal_name: ClassVar[str] = MarshalTypeName.LEXICAL_UUID


class ParameterisedType(TypeEngine):
    """Base for marshal types built from other types, e.g. `ReversedType(Int32Type)`.

    Subclasses declare how many component types they take. `max_params` of
    None means unbounded.
    """

    min_params: ClassVar[int] = 1
    max_params: ClassVar[Optional[int]] = None


class ReversedType(ParameterisedType):
    """Orders values of `base_type` in descending order."""
    marshal_name: ClassVar[str] = MarshalTypeName.REVERSED
    max_params: ClassVar[Optional[int]] = 1

    def __init__(self, base_type: TypeEngine, **kwargs):
        self.base_type = base_type
        super().__init__(**kwargs)

    @property
    def python_type(self) -> Optional[Type[Any]]:
        return self.base_type.python_type


class CompositeType(ParameterisedType):
    marshal_name: ClassVar[str] = MarshalTypeName.COMPOSITE

    def __init__(self, *component_types: TypeEngine, **kwargs):
        self.component_types: Tuple[TypeEngine, ...] = component_types
        super().__init__(**kwargs)

    @property
    def python_type(self) -> Optional[Type[Tuple[Any, ...]]]:
        return tuple


# builtin marshal types, by canonical name
marshal_types = MappingProxyType({
    cls.marshal_name: cls
    for cls in (
        AsciiType, UTF8Type, BytesType, BooleanType,
        Int32Type, LongType, CounterColumnType, IntegerType,
        DecimalType, FloatType, DoubleType,
        DateType, UUIDType, TimeUUIDType, LexicalUUIDType,
        ReversedType, CompositeType,
    )
})
