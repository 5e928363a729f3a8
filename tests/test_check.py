from __future__ import annotations

import textwrap
import types

from codein_namespaces.check import check


def _messages(text: str, file: str = "a.php") -> list[str]:
    return [d.message for d in check(file, text)]


def test_no_use_statements_yields_nothing() -> None:
    assert _messages("<?php\n\nclass A extends B {}\n") == []
    assert _messages("") == []


def test_check_is_lazy_generator() -> None:
    result = check("a.php", "use Foo;\n")

    assert isinstance(result, types.GeneratorType)
    assert next(result).message == "Unused: Foo in a.php"


def test_repeated_prefix_and_unused_names() -> None:
    messages = _messages("use Vendor\\Sub\\Foo;\nuse Vendor\\Sub\\Bar;\n")

    assert messages == [
        "Namespace Vendor\\Sub appears 2 times in a.php",
        "Unused: Foo in a.php",
        "Unused: Bar in a.php",
    ]


def test_instantiated_import_is_clean() -> None:
    assert _messages("use Vendor\\Sub\\Foo;\n$x = new Foo();\n") == []


def test_grouped_import_used_names_are_clean() -> None:
    text = "use Vendor\\Sub\\{Foo, Bar};\nclass C extends Foo implements Bar {}\n"

    assert _messages(text) == []


def test_aliased_import_resolved_for_catch() -> None:
    text = "use Vendor\\Exceptions\\MyError as Err;\ntry {} catch (Err $e) {}\n"

    assert _messages(text) == []


def test_grouped_imports_never_count_towards_duplicates() -> None:
    text = textwrap.dedent(
        """\
        use Vendor\\Sub\\{Foo, Bar};
        use Vendor\\Sub\\{Baz};
        use Vendor\\Sub\\Qux;
        new Foo; new Bar; new Baz; new Qux;
        """
    )

    assert _messages(text) == []


def test_duplicate_count_matches_occurrences() -> None:
    text = textwrap.dedent(
        """\
        use App\\Models\\User;
        use Psr\\Log\\LoggerInterface;
        use App\\Models\\Post;
        use App\\Models\\Comment;
        use Psr\\Log\\LogLevel;
        new User; new Post; new Comment; new LogLevel;
        function log(LoggerInterface $logger) {}
        """
    )

    assert _messages(text) == [
        "Namespace App\\Models appears 3 times in a.php",
        "Namespace Psr\\Log appears 2 times in a.php",
    ]


def test_name_imported_twice_reported_once() -> None:
    diagnostics = list(check("a.php", "use Vendor\\Sub\\Foo;\nuse Vendor\\Sub\\Foo;\n"))

    assert [d.kind for d in diagnostics] == ["duplicate_namespace", "unused_import"]
    assert diagnostics[1].subject == "Foo"


def test_import_line_does_not_count_as_its_own_use() -> None:
    assert _messages("use Foo;\n") == ["Unused: Foo in a.php"]


def test_trait_use_in_class_body_counts() -> None:
    text = "use App\\Concerns\\Loggable;\nclass A {\n    use Loggable;\n}\n"

    assert _messages(text) == []


def test_diagnostic_fields() -> None:
    diagnostic = next(check("src/A.php", "use Vendor\\Sub\\Foo;\n"))

    assert diagnostic.kind == "unused_import"
    assert diagnostic.severity == "red"
    assert diagnostic.subject == "Foo"
    assert diagnostic.file == "src/A.php"


def test_check_is_idempotent() -> None:
    text = "use A\\B\\C;\nuse A\\B\\D;\nuse E\\{F, G};\nnew C;\n"

    assert list(check("a.php", text)) == list(check("a.php", text))


def test_malformed_imports_do_not_raise() -> None:
    text = "use ;\nuse \\;\nuse A\\{;\nuse (broken*;\nuse Foo\\{A, B,};\n"

    messages = _messages(text)

    assert "Unused: A in a.php" in messages
    assert "Unused: B in a.php" in messages


def test_trailing_comma_in_group_reports_no_empty_name() -> None:
    messages = _messages("use Vendor\\Sub\\{Foo, Bar,};\nnew Foo; new Bar;\n")

    assert messages == []
