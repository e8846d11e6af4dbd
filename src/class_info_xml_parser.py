"""Logic for turning a class's XML record into a ClassInfo."""

from typing import TYPE_CHECKING

from src.class_info import ClassInfo, MethodInfo, ParameterInfo
from src.class_name import ClassName
from src.errors import MalformedClassRecordError
from src.leaf import Leaf

if TYPE_CHECKING:
    from src.javadoc_archive import JavadocArchive

VARARGS_SUFFIX = "..."


def parse_class_info(
    document: Leaf,
    archive: "JavadocArchive",
    *,
    entry_path: str,
    fallback_name: ClassName,
) -> ClassInfo:
    """Parse a class record, using the archive to build its URLs.

    ``fallback_name`` is used when the record carries no ``fullName``.
    Raises MalformedClassRecordError if there is no ``class`` root element
    or the name it declares is not a valid class name.
    """
    cls = document.select_first("/class")
    if cls is None:
        raise MalformedClassRecordError(entry_path, "missing <class> root element")

    full_name = cls.attribute("fullName")
    try:
        name = ClassName.parse(full_name) if full_name else fallback_name
    except ValueError as e:
        raise MalformedClassRecordError(entry_path, str(e)) from e
    if name.full_name == fallback_name.full_name:
        # the entry path knows where the package ends
        name = fallback_name

    methods = [_parse_method(c, name.simple_name) for c in cls.select("constructor")]
    methods.extend(_parse_method(m, None) for m in cls.select("method"))

    return ClassInfo(
        name=name,
        kind=cls.attribute("type") or "class",
        description=_description(cls),
        url=archive.url_for(name),
        frames_url=archive.url_for(name, frames=True),
        modifiers=cls.attribute("modifiers").split(),
        superclass=_superclass(cls),
        interfaces=_interfaces(cls),
        methods=methods,
        deprecated=_flag(cls.attribute("deprecated")),
        archive=archive,
    )


def _parse_method(node: Leaf, constructor_name: str | None) -> MethodInfo:
    """Parse a <method> or <constructor> element."""
    parameters = []
    for p in node.select("parameter"):
        type_ = p.attribute("type")
        varargs = type_.endswith(VARARGS_SUFFIX)
        parameters.append(ParameterInfo(type_, p.attribute("name"), varargs))

    return MethodInfo(
        name=constructor_name or node.attribute("name"),
        modifiers=node.attribute("modifiers").split(),
        return_type=None if constructor_name else node.attribute("returns") or "void",
        parameters=parameters,
        description=_description(node),
        deprecated=_flag(node.attribute("deprecated")),
    )


def _superclass(cls: Leaf) -> str | None:
    extends = cls.select_first("extends")
    if extends is None:
        return None
    return extends.attribute("class") or None


def _interfaces(cls: Leaf) -> list[str]:
    names = [i.attribute("class") for i in cls.select("implements")]
    return [n for n in names if n]


def _description(node: Leaf) -> str:
    desc = node.select_first("description")
    return desc.text if desc is not None else ""


def _flag(value: str) -> bool:
    return value.strip().lower() == "true"
