"""Data models for parsed class records."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.class_name import ClassName

if TYPE_CHECKING:
    from src.javadoc_archive import JavadocArchive


@dataclass(frozen=True)
class ParameterInfo:
    """A method or constructor parameter."""

    type: str
    name: str
    varargs: bool = False


@dataclass(frozen=True)
class MethodInfo:
    """A documented method or constructor."""

    name: str
    modifiers: list[str]
    return_type: str | None  # None for constructors
    parameters: list[ParameterInfo]
    description: str
    deprecated: bool = False

    @property
    def signature(self) -> str:
        """Render the parameter list, e.g. ``charAt(int index)``."""
        params = ", ".join(f"{p.type} {p.name}".strip() for p in self.parameters)
        return f"{self.name}({params})"


@dataclass
class ClassInfo:
    """Everything known about one class, as read from its archive entry."""

    name: ClassName
    kind: str  # class/interface/enum/annotation
    description: str
    url: str | None
    frames_url: str | None
    modifiers: list[str] = field(default_factory=list)
    superclass: str | None = None
    interfaces: list[str] = field(default_factory=list)
    methods: list[MethodInfo] = field(default_factory=list)
    deprecated: bool = False
    archive: "JavadocArchive | None" = field(default=None, repr=False, compare=False)

    @property
    def constructors(self) -> list[MethodInfo]:
        return [m for m in self.methods if m.return_type is None]
