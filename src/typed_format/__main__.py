"""Main entry point for typed-format when run as a module."""

from typed_format.formatter import format
from typed_format.project_info import get_project_info

_VECTOR = [1, 2, 3, 4, 5]
_MAP = {"1": 1.5, "2": 3.0, "3": 4.5}

DEMONSTRATIONS: list[tuple[str, str, tuple[object, ...]]] = [
    ("A single parameter.", "Hello {}", ("World",)),
    ("Automatic indices.", "{}, {}, {}, {}, {}", (1, 2, 3, 4, 5)),
    ("Explicit indices.", "{4}, {3}, {2}, {1}, {0}", (1, 2, 3, 4, 5)),
    ("Repeated references.", "{0}, {0}, {0}, {1}, {0}", (1, 2)),
    ("Different types.", "{}, {}, {}, {}", (10, 2.5, True, "text")),
    (
        "Fill, width and alignment.",
        "'{0:05}', '{0:5}', '{0:<5}', '{0:>5}', '{0:^5}'",
        (1,),
    ),
    (
        "Precision, width and alignment.",
        "{0:.2}, {0:.0}, {0:05.3}, {0:.5}, {0:<010.10}",
        (2.12579,),
    ),
    ("Containers.", "{}, {}", (_VECTOR, _MAP)),
    ("Selectors.", "{0.1}, {0[2]}, {1[4]}, {1.0.inc}", (_MAP, _VECTOR)),
]


def main() -> None:
    """Print project information followed by the demonstrations."""
    info = get_project_info()
    print(f"{info.name} v{info.version}: {info.description}")
    print()
    for number, (title, template, args) in enumerate(DEMONSTRATIONS, start=1):
        print(f"{number}. {title}")
        print(f"  {template!r} {args!r} =>")
        print(f"  {format(template, *args)}")


if __name__ == "__main__":
    main()
