"""Package and application name normalization.

Both helpers turn free-form user input into identifiers that compile on
the JVM. They never raise: input that cannot be salvaged yields the
supplied default.
"""

from __future__ import annotations

import re
import unicodedata

DEFAULT_PACKAGE_NAME = "com.example.demo"
DEFAULT_APPLICATION_NAME = "Application"

JAVA_KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
        "class", "const", "continue", "default", "do", "double", "else", "enum",
        "extends", "false", "final", "finally", "float", "for", "goto", "if",
        "implements", "import", "instanceof", "int", "interface", "long", "native",
        "new", "null", "package", "private", "protected", "public", "return",
        "short", "static", "strictfp", "super", "switch", "synchronized", "this",
        "throw", "throws", "transient", "true", "try", "void", "volatile", "while",
    }
)  # fmt: skip

_SEGMENT_INVALID = re.compile(r"[^a-z0-9_]")
_WORD_SPLIT = re.compile(r"[^A-Za-z0-9]+")


def _ascii(text: str) -> str:
    normalized = unicodedata.normalize("NFKD", text)
    return normalized.encode("ascii", "ignore").decode("ascii")


def clean_package_name(text: str | None, default: str = DEFAULT_PACKAGE_NAME) -> str:
    """Return a valid package name derived from *text*.

    Examples:
        >>> clean_package_name("com.Example.My-App")
        'com.example.my.app'
        >>> clean_package_name("org.acme.2fast.class")
        'org.acme._2fast._class'
        >>> clean_package_name("  ")
        'com.example.demo'
    """
    if not text or not text.strip():
        return default
    candidate = _ascii(text).strip().lower()
    candidate = re.sub(r"[\s-]+", ".", candidate)

    segments: list[str] = []
    for raw in candidate.split("."):
        segment = _SEGMENT_INVALID.sub("", raw)
        if not segment:
            continue
        if segment[0].isdigit() or segment in JAVA_KEYWORDS:
            segment = f"_{segment}"
        segments.append(segment)
    return ".".join(segments) if segments else default


def generate_application_name(
    name: str | None,
    default: str = DEFAULT_APPLICATION_NAME,
) -> str:
    """Return the main application class name for a project *name*.

    Examples:
        >>> generate_application_name("demo")
        'DemoApplication'
        >>> generate_application_name("my-cool app")
        'MyCoolAppApplication'
        >>> generate_application_name("InventoryApplication")
        'InventoryApplication'
        >>> generate_application_name("42")
        'Application'
    """
    if not name or not name.strip():
        return default
    words = [w for w in _WORD_SPLIT.split(_ascii(name)) if w]
    if not words:
        return default
    camel = "".join(w[0].upper() + w[1:] for w in words)
    if not camel[0].isalpha():
        return default
    if camel.endswith("Application"):
        return camel
    return f"{camel}Application"
