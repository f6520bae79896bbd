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

import importlib
import importlib.resources
import logging
from typing import List, Optional

from lark import Lark, Transformer, v_args, Token
from lark.exceptions import LarkError
from sqlalchemy.sql.type_api import TypeEngine

from ..consts import MARSHAL_PACKAGE
from ..datatype import ParameterisedType, marshal_types
from ..exc import ConfigurationError


logger = logging.getLogger(__name__)


def _find_type_class(name: str) -> type:
    """Find the type class for a (possibly qualified) type name.

    Bare names and names under the builtin marshal package are looked up in
    the builtin registry. Other dotted names are imported as `module.ClassName`,
    which is how custom types are plugged in.

    Importing runs the named module, with whatever side effects its import has.
    Type tokens therefore should only come from trusted DDL.
    """
    builtin_prefix = MARSHAL_PACKAGE + "."
    short_name = name[len(builtin_prefix):] if name.startswith(builtin_prefix) else name
    if short_name in marshal_types:
        return marshal_types[short_name]

    module_name, _, class_name = name.rpartition(".")
    if not module_name or name.startswith(builtin_prefix):
        raise ConfigurationError(f"Unable to find type class '{name}'", name)
    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise ConfigurationError(f"Unable to find type class '{name}': {e}", name) from e

    type_class = getattr(module, class_name, None)
    if not (isinstance(type_class, type) and issubclass(type_class, TypeEngine)):
        raise ConfigurationError(f"Invalid type class '{name}': not a TypeEngine subclass", name)
    logger.debug(f"loaded custom type class: {name}")
    return type_class


def build_type(name: str, params: List[TypeEngine]) -> TypeEngine:
    """Instantiate the type named `name` with the given component types."""
    type_class = _find_type_class(name)
    if issubclass(type_class, ParameterisedType):
        n = len(params)
        if n < type_class.min_params or (type_class.max_params is not None and n > type_class.max_params):
            raise ConfigurationError(f"Wrong number of parameters for {name}: {n}", name)
    elif params:
        raise ConfigurationError(f"{name} does not take parameters", name)
    try:
        return type_class(*params)
    except Exception as e:
        raise ConfigurationError(f"Unable to instantiate type class '{name}': {e}", name) from e


class TypeExpressionTransformer(Transformer):
    """
    Use lark-parser to parse a type expression.
    And generate the corresponding SQLAlchemy type object.
    """

    def type_params(self, params: List[TypeEngine]) -> List[TypeEngine]:
        return params

    @v_args(inline=True)
    def data_type(self, name: Token, params: Optional[List[TypeEngine]] = None) -> TypeEngine:
        return build_type(str(name), params or [])


# For singleton pattern
_grammar_text = None
# For singleton pattern
_type_parser = None


def _get_grammar_text() -> str:
    global _grammar_text
    if _grammar_text is None:
        _grammar_text = importlib.resources.files("cqlschema.drivers").joinpath("grammar.lark").read_text()
    return _grammar_text


def get_type_parser() -> Lark:
    """
    Returns a singleton instance of the type expression Lark parser.
    """
    global _type_parser
    if _type_parser is None:
        grammar_text = _get_grammar_text()
        _type_parser = Lark(grammar_text, parser="lalr", start="data_type", transformer=TypeExpressionTransformer())
    return _type_parser


def parse_type(type_str: str) -> TypeEngine:
    """
    Parses a canonical type expression and returns a SQLAlchemy type object.

    Args:
        type_str: The type expression to parse, e.g. 'ReversedType(Int32Type)'.

    Returns:
        A SQLAlchemy type object.

    Raises:
        ConfigurationError: if the expression is malformed or names an unknown type.
    """
    try:
        return get_type_parser().parse(type_str)
    except LarkError as e:
        raise ConfigurationError(f"Syntax error parsing '{type_str}': {e}", type_str) from e
