"""Domain entities for extracted API symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .enums import PageKind


@dataclass(frozen=True)
class Parameter:
    name: str
    description: str = ""
    type: str | None = None


@dataclass(frozen=True)
class PropertyDecl:
    name: str
    property_type: str
    is_read_only: bool = False
    documentation: str = ""


@dataclass(frozen=True)
class SelectorPart:
    keyword: str
    argument: str | None = None


@dataclass(frozen=True)
class MethodDecl:
    name: str
    selector: list[SelectorPart]
    parameters: list[Parameter] = field(default_factory=list)
    return_type: str | None = None
    return_description: str = ""
    is_class_method: bool = False
    documentation: str = ""

    @property
    def argument_count(self) -> int:
        return sum(1 for part in self.selector if part.argument)


@dataclass(frozen=True)
class ConstantDecl:
    """A constant whose value is never known from the reference page."""

    name: str
    description: str = ""


@dataclass(frozen=True)
class EnumerationDecl:
    name: str
    constants: list[ConstantDecl] = field(default_factory=list)
    documentation: str = ""


@dataclass(frozen=True)
class StructMember:
    name: str
    type: str
    description: str = ""


@dataclass(frozen=True)
class StructDecl:
    name: str
    members: list[StructMember] = field(default_factory=list)
    documentation: str = ""


@dataclass(frozen=True)
class FunctionDecl:
    name: str
    parameters: list[Parameter] = field(default_factory=list)
    return_type: str = "nil"
    return_description: str = ""
    documentation: str = ""


Member = Union[PropertyDecl, MethodDecl]
Constant = Union[EnumerationDecl, ConstantDecl]


@dataclass(frozen=True)
class ClassDecl:
    name: str
    superclass: str | None = None
    members: list[Member] = field(default_factory=list)
    constants: list[Constant] = field(default_factory=list)
    structs: list[StructDecl] = field(default_factory=list)
    documentation: str = ""

    def has_members(self) -> bool:
        return len(self.members) > 0


@dataclass(frozen=True)
class ProtocolDecl:
    name: str
    members: list[Member] = field(default_factory=list)
    constants: list[Constant] = field(default_factory=list)
    structs: list[StructDecl] = field(default_factory=list)
    documentation: str = ""

    def has_members(self) -> bool:
        return len(self.members) > 0


Symbol = Union[ClassDecl, ProtocolDecl, FunctionDecl, StructDecl, EnumerationDecl, ConstantDecl]


@dataclass(frozen=True)
class PageStub:
    """Everything extracted from one reference page."""

    kind: PageKind
    name: str
    framework_path: str | None = None
    symbols: list[Symbol] = field(default_factory=list)
