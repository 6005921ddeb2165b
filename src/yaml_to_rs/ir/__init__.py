"""Intermediate Representation (IR) models for code generation.

The IR sits between the pydantic schema models and the templates:

1. `TypeRef` and `DataType` name and classify types
2. `ModuleTree` holds the resolved closure of named types by namespace
3. The context dataclasses are the flat, template-ready projection
"""

from yaml_to_rs.ir.context import (
    ArgumentContext,
    CommandContext,
    ConfigContext,
    EnumTypeContext,
    InterfaceContext,
    ObjectTypeContext,
    RenderContext,
    SlotContext,
    TypeModuleContext,
)
from yaml_to_rs.ir.module_tree import (
    EnumDefinition,
    ModuleNode,
    ModuleTree,
    ObjectDefinition,
    Property,
    TypeDefinition,
)
from yaml_to_rs.ir.types import TYPES_MODULE_PATH, DataType, ScalarKind, TypeRef

__all__ = [
    # Types
    "TYPES_MODULE_PATH",
    "DataType",
    "ScalarKind",
    "TypeRef",
    # Module tree
    "EnumDefinition",
    "ModuleNode",
    "ModuleTree",
    "ObjectDefinition",
    "Property",
    "TypeDefinition",
    # Render context
    "ArgumentContext",
    "CommandContext",
    "ConfigContext",
    "EnumTypeContext",
    "InterfaceContext",
    "ObjectTypeContext",
    "RenderContext",
    "SlotContext",
    "TypeModuleContext",
]
