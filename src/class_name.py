"""Data model for fully-qualified Java class names."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassName:
    """A class name split into package, outer classes and simple name.

    Equality and hashing only consider the fully-qualified form, so two
    names that render to the same string are interchangeable.
    """

    package_name: str | None = field(compare=False)
    outer_classes: tuple[str, ...] = field(compare=False)
    simple_name: str = field(compare=False)
    full_name: str = field(init=False)

    def __post_init__(self) -> None:
        """Normalize the outer class chain and compute the full name."""
        object.__setattr__(self, "outer_classes", tuple(self.outer_classes))
        parts = [self.package_name or "", *self.outer_classes, self.simple_name]
        object.__setattr__(self, "full_name", ".".join(p for p in parts if p))

    @classmethod
    def parse(cls, full_name: str) -> "ClassName":
        """Parse a dotted name such as ``java.util.Map.Entry``.

        Leading lowercase segments are treated as the package; the first
        segment that starts with an uppercase letter begins the class chain.
        """
        segments = full_name.split(".")
        if not full_name or any(not s for s in segments):
            msg = f"Invalid class name: {full_name!r}"
            raise ValueError(msg)

        split = next(
            (i for i, s in enumerate(segments) if s[0].isupper()),
            len(segments) - 1,
        )
        package = ".".join(segments[:split]) or None
        classes = segments[split:]
        return cls(package, tuple(classes[:-1]), classes[-1])

    @property
    def outer_and_simple(self) -> str:
        """Return the class chain without the package, e.g. ``Map.Entry``."""
        return ".".join([*self.outer_classes, self.simple_name])

    def __str__(self) -> str:
        return self.full_name
