"""Ruby stub formatter for extracted page symbols."""

from __future__ import annotations

from rb_docset.domain.entities import (
    ClassDecl,
    Constant,
    ConstantDecl,
    EnumerationDecl,
    FunctionDecl,
    Member,
    MethodDecl,
    PageStub,
    PropertyDecl,
    ProtocolDecl,
    StructDecl,
    Symbol,
)

INDENT = "  "
UNRESOLVED_VALUE = "nil"
BOXED_SUPERCLASS = "Boxed"


class RubyStubFormatter:
    """Formats a PageStub as YARD-annotated Ruby source."""

    def format_page(self, stub: PageStub) -> str:
        if stub.framework_path:
            header = f"# -*- framework: {stub.framework_path} -*-\n\n"
        else:
            header = "\n\n"
        return header + "".join(self.format_symbol(symbol) for symbol in stub.symbols)

    def format_symbol(self, symbol: Symbol) -> str:
        if isinstance(symbol, ClassDecl):
            return self._format_class(symbol)
        if isinstance(symbol, ProtocolDecl):
            return self._format_protocol(symbol)
        if isinstance(symbol, FunctionDecl):
            return self._format_function(symbol)
        if isinstance(symbol, StructDecl):
            return self._format_struct(symbol)
        if isinstance(symbol, (EnumerationDecl, ConstantDecl)):
            return self._format_constant(symbol)
        raise TypeError(f"Unsupported symbol: {symbol!r}")

    def format_member(self, member: Member) -> str:
        if isinstance(member, PropertyDecl):
            return self._format_property(member)
        return self._format_method(member)

    def _format_class(self, decl: ClassDecl) -> str:
        opening = f"class {decl.name} < {decl.superclass}" if decl.superclass else f"class {decl.name}"
        return self._format_container(decl.documentation, opening, decl)

    def _format_protocol(self, decl: ProtocolDecl) -> str:
        return self._format_container(decl.documentation, f"module {decl.name} # Protocol", decl)

    def _format_container(self, documentation: str, opening: str, decl: ClassDecl | ProtocolDecl) -> str:
        parts: list[str] = [_comment(documentation), f"{opening}\n\n"]
        parts.extend(self.format_member(member) for member in decl.members)
        parts.append("end\n")
        parts.extend(self._format_constant(constant) for constant in decl.constants)
        parts.extend(self._format_struct(struct) for struct in decl.structs)
        return "".join(parts)

    def _format_property(self, prop: PropertyDecl) -> str:
        accessor = "attr_reader" if prop.is_read_only else "attr_accessor"
        return (
            _comment(prop.documentation, INDENT)
            + _line(f"{INDENT}# @return [{prop.property_type}]")
            + f"{INDENT}{accessor} :{prop.name}\n\n"
        )

    def _format_method(self, method: MethodDecl) -> str:
        parts: list[str] = [_comment(method.documentation, INDENT)]
        for param in method.parameters:
            typed = f"[{param.type}] " if param.type else ""
            parts.append(_line(f"{INDENT}# @param {typed}{param.name} {param.description}"))
        if method.return_type or method.return_description:
            typed = f"[{method.return_type}] " if method.return_type else ""
            parts.append(_line(f"{INDENT}# @return {typed}{method.return_description}"))
        if method.is_class_method:
            parts.append(f"{INDENT}# @scope class\n")
        parts.append(f"{INDENT}def {_method_signature(method)}; end\n\n")
        return "".join(parts)

    def _format_constant(self, constant: Constant) -> str:
        if isinstance(constant, ConstantDecl):
            return _comment(constant.description, INDENT) + f"{INDENT}{constant.name} = {UNRESOLVED_VALUE}\n"

        parts: list[str] = [_comment(constant.documentation), f"module {constant.name} # Enumeration\n\n"]
        parts.extend(self._format_constant(member) for member in constant.constants)
        parts.append("end\n")
        return "".join(parts)

    def _format_struct(self, struct: StructDecl) -> str:
        parts: list[str] = [_comment(struct.documentation), f"class {struct.name} < {BOXED_SUPERCLASS}\n"]
        for member in struct.members:
            parts.append(_line(f"{INDENT}# @return [{member.type}] {member.description}"))
            parts.append(f"{INDENT}attr_accessor :{member.name}\n")
        parts.append("end\n\n")
        return "".join(parts)

    def _format_function(self, function: FunctionDecl) -> str:
        parts: list[str] = [_comment(function.documentation)]
        for param in function.parameters:
            parts.append(_line(f"# @param [{param.type}] {param.name} {param.description}"))
        parts.append(_line(f"# @return [{function.return_type}] {function.return_description}"))
        args = ", ".join(param.name for param in function.parameters)
        parts.append(f"def {function.name}({args}); end\n\n")
        return "".join(parts)


def _method_signature(method: MethodDecl) -> str:
    """'setValue(value, forKey:key)' for the selector setValue:forKey:."""
    head, *rest = method.selector
    args: list[str] = [head.argument] if head.argument else []
    args.extend(f"{part.keyword}:{part.argument}" if part.argument else part.keyword for part in rest)
    return f"{head.keyword}({', '.join(args)})"


def _comment(text: str, indent: str = "") -> str:
    """Prefix every line of text with '# '; empty text gives no lines."""
    if not text.strip():
        return ""
    return "".join(_line(f"{indent}# {line.strip()}") for line in text.strip().splitlines())


def _line(text: str) -> str:
    return text.rstrip() + "\n"
