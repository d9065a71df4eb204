from __future__ import annotations

import pytest

from astra.transpiler.functions import is_function_line, parse_signature


class TestSignatureTranslation:
    """fn lines become one C++ signature line plus a block opener."""

    def test_typed_parameters_and_return_type(self, transpile) -> None:
        result = transpile("fn add(a: int, b: int) -> int {")
        assert result.body == ["int add(int a, int b) {"]
        assert result.state.depth == 1

        signature = result.state.functions["add"]
        assert signature.return_type == "int"
        assert signature.params == (("a", "int"), ("b", "int"))
        assert signature.modifiers == ()

    def test_untyped_parameter_gets_placeholder(self, transpile) -> None:
        result = transpile("fn f(x) {")
        assert result.body == ["void f(any x) {"]
        assert result.state.functions["f"].params == (("x", "any"),)
        assert result.diagnostics == []

    def test_missing_return_type_is_void(self, body) -> None:
        assert body("fn greet(name: string) {") == ["void greet(string name) {"]

    def test_no_parameters(self, body) -> None:
        assert body("fn main() -> int {") == ["int main() {"]

    def test_opening_brace_is_optional(self, transpile) -> None:
        result = transpile("fn tick()")
        assert result.body == ["void tick() {"]
        assert result.state.depth == 1

    def test_template_types_keep_their_commas(self, body) -> None:
        assert body("fn lookup(m: map<string, int>, key: string) -> int {") == [
            "int lookup(map<string, int> m, string key) {"
        ]

    def test_qualified_types(self, body) -> None:
        assert body("fn show(s: std::string) -> std::size_t {") == [
            "std::size_t show(std::string s) {"
        ]

    def test_default_argument(self, body) -> None:
        assert body("fn pad(width: int = 4) {") == ["void pad(int width = 4) {"]

    def test_nested_function_is_indented(self, body) -> None:
        assert body("fn outer() {\nfn inner() {") == ["void outer() {", "    void inner() {"]


class TestModifiers:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("pub fn area() -> double {", "public: double area() {"),
            ("public fn area() -> double {", "public: double area() {"),
            ("priv fn helper() {", "private: void helper() {"),
            ("prot fn hook() {", "protected: void hook() {"),
            ("static fn count() -> int {", "static int count() {"),
            ("virtual fn draw() {", "virtual void draw() {"),
            ("pub virtual fn draw() {", "public: virtual void draw() {"),
            ("pub static fn make() -> int {", "public: static int make() {"),
        ],
    )
    def test_modifier_rendering(self, body, source: str, expected: str) -> None:
        assert body(source) == [expected]

    def test_modifiers_are_recorded(self, transpile) -> None:
        result = transpile("pub virtual fn draw() {")
        signature = result.state.functions["draw"]
        assert signature.modifiers == ("public", "virtual")
        assert signature.access == "public"


class TestMalformedSignatures:
    def test_missing_closing_parenthesis_keeps_going(self, transpile) -> None:
        result = transpile(
            """\
            fn broken(a: int, b: int -> int {
            x = 5
            print(x)
            """
        )
        assert result.body == [
            "// Error parsing function: fn broken(a: int, b: int -> int {",
            "any x = 5;",
            "print(x);",
        ]
        assert result.state.depth == 0
        assert "broken" not in result.state.functions
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].line == 1
        assert result.diagnostics[0].kind == "function"

    @pytest.mark.parametrize(
        "line",
        [
            "fn (a: int) {",
            "fn 1abc() {",
            "fn f(a: ) {",
            "fn f(a,, b) {",
            "fn f() -> {",
        ],
    )
    def test_malformed_lines_return_none(self, line: str) -> None:
        assert parse_signature(line) is None


def test_redeclaration_keeps_latest_signature(transpile) -> None:
    result = transpile("fn f(a: int) {\n}\nfn f(a: float) -> float {\n}")
    assert result.state.functions["f"].params == (("a", "float"),)
    assert result.state.functions["f"].return_type == "float"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("fn f() {", True),
        ("pub fn f() {", True),
        ("static virtual fn f() {", True),
        ("fnord = 3", False),
        ("static x = 3", False),
        ("print(fn)", False),
    ],
)
def test_is_function_line(line: str, expected: bool) -> None:
    assert is_function_line(line) is expected
