from __future__ import annotations

import pytest

from astra.errors import AstraTranslationError
from astra.transpiler.control_flow import continuation_keyword, wrap_condition


class TestConditionals:
    """if / elif / else chains."""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("if x > 5 {", "if (x > 5) {"),
            ("if x > 5", "if (x > 5) {"),
            ("if (x > 5) {", "if (x > 5) {"),
            ("if(ready)", "if (ready) {"),
            ("if (a) && (b) {", "if ((a) && (b)) {"),
        ],
    )
    def test_if_header(self, transpile, source: str, expected: str) -> None:
        result = transpile(source)
        assert result.body == [expected]
        assert result.state.depth == 1

    def test_full_chain_with_brace_continuations(self, transpile) -> None:
        result = transpile(
            """\
            if x > 0 {
                print(x)
            } elif x < 0 {
                print(-x)
            } else {
                print(0)
            }
            """
        )
        assert result.body == [
            "if (x > 0) {",
            "    print(x);",
            "} else if (x < 0) {",
            "    print(-x);",
            "} else {",
            "    print(0);",
            "}",
        ]
        assert result.state.depth == 0

    def test_elif_and_else_on_their_own_lines(self, transpile) -> None:
        result = transpile(
            """\
            if a
            x = 1
            }
            elif b
            x = 2
            }
            else
            x = 3
            }
            """
        )
        assert result.body == [
            "if (a) {",
            "    any x = 1;",
            "}",
            "else if (b) {",
            "    any x = 2;",
            "}",
            "else {",
            "    any x = 3;",
            "}",
        ]
        assert result.state.depth == 0

    def test_else_after_closing_brace_inside_function(self, transpile) -> None:
        result = transpile(
            """\
            fn main() {
            if x {
            a()
            }
            else {
            b()
            }
            }
            """
        )
        assert result.body == [
            "void main() {",
            "    if (x) {",
            "        a();",
            "    }",
            "    else {",
            "        b();",
            "    }",
            "}",
        ]
        assert result.state.depth == 0
        assert result.diagnostics == []

    def test_elif_after_closing_brace_inside_function(self, body) -> None:
        lines = body(
            """\
            fn pick(n: int) -> int {
            if n > 0 {
            return 1
            }
            elif n < 0 {
            return -1
            }
            return 0
            }
            """
        )
        assert lines == [
            "int pick(int n) {",
            "    if (n > 0) {",
            "        return 1;",
            "    }",
            "    else if (n < 0) {",
            "        return -1;",
            "    }",
            "    return 0;",
            "}",
        ]

    def test_separate_else_balances_braces(self, transpile) -> None:
        result = transpile("fn f() {\nif a {\nx()\n}\nelse if b {\ny()\n}\nelse {\nz()\n}\n}")
        opened = sum(line.count("{") for line in result.body)
        closed = sum(line.count("}") for line in result.body)
        assert opened == closed == 4
        assert result.state.depth == 0
    def test_else_if_spelling(self, body) -> None:
        assert body("if a {\n} else if b {\n}") == ["if (a) {", "} else if (b) {", "}"]

    def test_chain_inside_function_keeps_indentation(self, body) -> None:
        lines = body(
            """\
            fn sign(x: int) -> int {
            if x < 0 {
            return -1
            } else {
            return 1
            }
            }
            """
        )
        assert lines == [
            "int sign(int x) {",
            "    if (x < 0) {",
            "        return -1;",
            "    } else {",
            "        return 1;",
            "    }",
            "}",
        ]

    @pytest.mark.parametrize(
        "source, kind",
        [
            ("if {", "if statement"),
            ("elif", "elif statement"),
            ("else whatever {", "else statement"),
        ],
    )
    def test_headers_without_condition_become_placeholders(
        self, transpile, source: str, kind: str
    ) -> None:
        result = transpile(source)
        assert result.body == [f"// Error parsing {kind}: {source}"]
        assert result.state.depth == 0
        assert [d.kind for d in result.diagnostics] == [kind]


class TestLoops:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("for i in range(0, 10)", "for (int i = 0; i < 10; i++) {"),
            ("for i in range(0, 10) {", "for (int i = 0; i < 10; i++) {"),
            ("for i in range(n)", "for (int i = 0; i < n; i++) {"),
            ("for k in range(start, f(a, b)) {", "for (int k = start; k < f(a, b); k++) {"),
            ("for item in items {", "for (any& item : items) {"),
            ("for c in word", "for (any& c : word) {"),
            ("while running {", "while (running) {"),
            ("while (i < 3)", "while (i < 3) {"),
        ],
    )
    def test_loop_header(self, transpile, source: str, expected: str) -> None:
        result = transpile(source)
        assert result.body == [expected]
        assert result.state.depth == 1

    @pytest.mark.parametrize(
        "source",
        [
            "for i in range()",
            "for i in range(1, 2, 3)",
            "for i in range(1, )",
            "for i",
        ],
    )
    def test_malformed_for_is_a_placeholder(self, transpile, source: str) -> None:
        result = transpile(source)
        assert result.body == [f"// Error parsing for loop: {source}"]
        assert result.state.depth == 0

    def test_while_without_condition(self, body) -> None:
        assert body("while") == ["// Error parsing while loop: while"]

    def test_nested_loops(self, body) -> None:
        lines = body(
            """\
            for i in range(3) {
            for j in range(i) {
            print(j)
            }
            }
            """
        )
        assert lines == [
            "for (int i = 0; i < 3; i++) {",
            "    for (int j = 0; j < i; j++) {",
            "        print(j);",
            "    }",
            "}",
        ]


class TestBlockClose:
    def test_close_lines_up_with_header(self, body) -> None:
        assert body("while x {\nx = x - 1\n}") == [
            "while (x) {",
            "    any x = x - 1;",
            "}",
        ]

    def test_stray_close_is_clamped(self, transpile) -> None:
        result = transpile("}\nx = 1")
        assert result.body == ["}", "any x = 1;"]
        assert result.state.depth == 0

    def test_stray_close_raises_under_error_policy(self, transpile) -> None:
        with pytest.raises(AstraTranslationError) as excinfo:
            transpile("if a {\n}\n}", underflow="error")
        assert excinfo.value.line == 3
        assert excinfo.value.code == "ASTRA_TRANSLATION_ERROR"


@pytest.mark.parametrize(
    "condition, expected",
    [
        ("x", "(x)"),
        ("(x)", "(x)"),
        ("(a) || (b)", "((a) || (b))"),
        ("  (f(x) == 1)  ", "(f(x) == 1)"),
    ],
)
def test_wrap_condition(condition: str, expected: str) -> None:
    assert wrap_condition(condition) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("} elif x {", "elif"),
        ("} else {", "else"),
        ("}else{", "else"),
        ("} else if x {", "else"),
        ("} catch (e) {", ""),
        ("else {", ""),
        ("x = 1", ""),
    ],
)
def test_continuation_keyword(line: str, expected: str) -> None:
    assert continuation_keyword(line) == expected
