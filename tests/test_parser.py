"""
Test suite for the Lox expression parser.

Tests cover:
- Precedence and associativity of every tier
- The comma and conditional operators
- Error productions for binary operators missing a left operand
- Panic-mode recovery and error reporting

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxexpr.lexer.lexer import Lexer
from loxexpr.lexer.tokens import TokenType, make_token
from loxexpr.parser.parser import Parser, parse_string
from loxexpr.parser.printer import AstPrinter
from loxexpr.parser.errors import ParseError
from loxexpr.parser.ast_nodes import Literal, Binary, Ternary, Grouping
from loxexpr.reporting import ErrorReporter


def parse(source: str, reporter: ErrorReporter = None, require_end: bool = False):
    """Scan and parse a source string, returning (expression, parser)."""
    tokens = Lexer(source).tokenize()
    parser = Parser(tokens, reporter=reporter)
    return parser.parse(require_end=require_end), parser


class TestParserPrecedence(unittest.TestCase):
    """Tree shapes for well-formed expressions."""

    def setUp(self):
        self.printer = AstPrinter()

    def assertParsesTo(self, source: str, expected: str):
        expr, parser = parse(source)
        self.assertIsNotNone(expr, f"{source!r} failed to parse: {parser.errors}")
        self.assertEqual(self.printer.print(expr), expected)

    def test_basic_parsing(self):
        """Test the shapes from the chapter fixtures."""
        self.assertParsesTo("1 + 2", "(+ 1.0 2.0)")
        self.assertParsesTo("1 + 2 * 3", "(+ 1.0 (* 2.0 3.0))")
        self.assertParsesTo("(1 + 2) * 3", "(* (group (+ 1.0 2.0)) 3.0)")
        self.assertParsesTo("!true", "(! true)")
        self.assertParsesTo("-5", "(- 5.0)")
        self.assertParsesTo("1 == 2", "(== 1.0 2.0)")
        self.assertParsesTo("1 != 2", "(!= 1.0 2.0)")
        self.assertParsesTo("1 < 2", "(< 1.0 2.0)")
        self.assertParsesTo("1 >= 2", "(>= 1.0 2.0)")

    def test_left_associative_tiers(self):
        """Test that every binary tier folds to the left."""
        for operator in ["+", "-", "*", "/", "==", "!=", "<", "<=", ">", ">=", ","]:
            with self.subTest(operator=operator):
                self.assertParsesTo(
                    f"1 {operator} 2 {operator} 3",
                    f"({operator} ({operator} 1.0 2.0) 3.0)",
                )

    def test_unary_nesting(self):
        self.assertParsesTo("!!true", "(! (! true))")
        self.assertParsesTo("--1", "(- (- 1.0))")
        self.assertParsesTo("-1 * 2", "(* (- 1.0) 2.0)")

    def test_literals(self):
        self.assertParsesTo("nil", "nil")
        self.assertParsesTo("false", "false")
        self.assertParsesTo('"hi there"', "hi there")
        self.assertParsesTo("12.5", "12.5")

    def test_comma_operator(self):
        """Test that comma binds loosest and folds left."""
        self.assertParsesTo("1, 2", "(, 1.0 2.0)")
        self.assertParsesTo("1, 2, 3", "(, (, 1.0 2.0) 3.0)")
        self.assertParsesTo("1 + 2, 3 + 4", "(, (+ 1.0 2.0) (+ 3.0 4.0))")
        self.assertParsesTo("1, 2 + 3", "(, 1.0 (+ 2.0 3.0))")
        self.assertParsesTo("(1, 2)", "(group (, 1.0 2.0))")

    def test_ternary_operator(self):
        """Test conditional parsing and its right associativity."""
        self.assertParsesTo("true ? 1 : 2", "(?: true 1.0 2.0)")
        self.assertParsesTo("1 + 2 ? 3 : 4", "(?: (+ 1.0 2.0) 3.0 4.0)")
        self.assertParsesTo("true ? 1, 2 : 3", "(?: true (, 1.0 2.0) 3.0)")
        self.assertParsesTo("1 ? 2 : 3 ? 4 : 5", "(?: 1.0 2.0 (?: 3.0 4.0 5.0))")
        self.assertParsesTo("1 == 1 ? 10 : 20", "(?: (== 1.0 1.0) 10.0 20.0)")
        self.assertParsesTo("1, 2 ? 3 : 4", "(, 1.0 (?: 2.0 3.0 4.0))")

    def test_ternary_node_fields(self):
        expr, _ = parse("true ? 1 : 2")
        self.assertIsInstance(expr, Ternary)
        self.assertEqual(expr.condition, Literal(True))
        self.assertEqual(expr.then_branch, Literal(1.0))
        self.assertEqual(expr.else_branch, Literal(2.0))

    def test_binary_keeps_operator_token(self):
        expr, _ = parse("1\n+\n2")
        self.assertIsInstance(expr, Binary)
        self.assertEqual(expr.operator.type, TokenType.PLUS)
        self.assertEqual(expr.operator.line, 2)

    def test_trailing_tokens_left_to_caller(self):
        expr, parser = parse("1 2")
        self.assertEqual(expr, Literal(1.0))
        self.assertFalse(parser.at_end())

    def test_hand_built_tokens(self):
        tokens = [
            make_token(TokenType.LEFT_PAREN, "("),
            make_token(TokenType.NUMBER, "4", 4.0),
            make_token(TokenType.RIGHT_PAREN, ")"),
            make_token(TokenType.EOF, ""),
        ]
        expr = Parser(tokens).parse()
        self.assertEqual(expr, Grouping(Literal(4.0)))

    def test_token_list_must_end_with_eof(self):
        with self.assertRaises(ValueError):
            Parser([make_token(TokenType.NUMBER, "1", 1.0)])


class TestParserErrors(unittest.TestCase):
    """Syntax errors, error productions and recovery."""

    def setUp(self):
        self.reporter = ErrorReporter()

    def test_missing_left_operand(self):
        """Test that each binary operator in operand position is an error."""
        for source in ["+ 1", "* 2", "/ 3", "== 4", "!= 5", "> 6", ">= 7", "< 8", "<= 9"]:
            with self.subTest(source=source):
                self.reporter.reset()
                expr, parser = parse(source, self.reporter)
                self.assertIsNone(expr)
                self.assertTrue(self.reporter.had_error)
                self.assertEqual(len(parser.errors), 1)
                self.assertEqual(parser.errors[0].message, "Missing left-hand operand.")
                self.assertEqual(parser.errors[0].token.lexeme, source.split()[0])

    def test_unary_minus_is_not_an_error(self):
        expr, parser = parse("-1", self.reporter)
        self.assertEqual(AstPrinter().print(expr), "(- 1.0)")
        self.assertFalse(self.reporter.had_error)
        self.assertEqual(parser.errors, [])

    def test_missing_operand_inside_expression(self):
        expr, parser = parse("1 + * 2", self.reporter)
        self.assertIsNone(expr)
        self.assertEqual([e.message for e in parser.errors], ["Missing left-hand operand."])
        self.assertEqual(self.reporter.messages, ["[line 1] Error at '*': Missing left-hand operand."])

    def test_expect_expression(self):
        expr, parser = parse(")", self.reporter)
        self.assertIsNone(expr)
        self.assertEqual(self.reporter.messages, ["[line 1] Error at ')': Expect expression."])

    def test_error_at_end(self):
        expr, _ = parse("1 +", self.reporter)
        self.assertIsNone(expr)
        self.assertEqual(self.reporter.messages, ["[line 1] Error at end: Expect expression."])

    def test_unclosed_grouping(self):
        expr, parser = parse("(1 + 2", self.reporter)
        self.assertIsNone(expr)
        self.assertEqual(parser.errors[0].message, "Expect ')' after expression.")

    def test_ternary_missing_colon(self):
        expr, parser = parse("true ? 1", self.reporter)
        self.assertIsNone(expr)
        self.assertEqual(len(parser.errors), 1)
        self.assertEqual(
            parser.errors[0].message,
            "Expect ':' after then branch of conditional expression.",
        )

    def test_no_cascading_errors(self):
        """Test that one malformed expression reports one error."""
        expr, parser = parse("(1 +", self.reporter)
        self.assertIsNone(expr)
        self.assertEqual(len(parser.errors), 1)
        self.assertEqual(len(self.reporter.reports), 1)

    def test_missing_operand_keeps_later_errors(self):
        """Test that a recovered missing operand does not hide the next error."""
        for source, operators in [
            ("+ 1 + * 2", ["+", "*"]),
            ("+ 1, * 2", ["+", "*"]),
            ("(== 1) + (< 2)", ["==", "<"]),
        ]:
            with self.subTest(source=source):
                self.reporter.reset()
                expr, parser = parse(source, self.reporter)
                self.assertIsNone(expr)
                self.assertEqual(
                    [(e.message, e.token.lexeme) for e in parser.errors],
                    [("Missing left-hand operand.", op) for op in operators],
                )
                self.assertEqual(len(self.reporter.reports), 2)

    def test_missing_operand_then_unclosed_grouping(self):
        _, parser = parse("(+ 1", self.reporter)
        self.assertEqual(
            [e.message for e in parser.errors],
            ["Missing left-hand operand.", "Expect ')' after expression."],
        )

    def test_deep_nesting_is_reported(self):
        """Test that nesting past the Python stack becomes a syntax error."""
        source = "(" * 1000 + "1" + ")" * 1000
        expr, parser = parse(source, self.reporter)
        self.assertIsNone(expr)
        self.assertEqual([e.message for e in parser.errors], ["Expression too deeply nested."])
        self.assertEqual(parser.errors[0].diagnostic.code, "P004")
        self.assertTrue(self.reporter.had_error)

    def test_long_flat_chain_parses(self):
        expr, parser = parse(" + ".join(["1"] * 1000), self.reporter)
        self.assertIsNotNone(expr)
        self.assertEqual(parser.errors, [])

    def test_recovery_finds_later_errors(self):
        """Test that the parser resynchronizes and keeps looking."""
        expr, parser = parse("1 + ) 2 * * 3", self.reporter)
        self.assertIsNone(expr)
        self.assertEqual(
            [(e.message, e.token.lexeme) for e in parser.errors],
            [("Expect expression.", ")"), ("Missing left-hand operand.", "*")],
        )

    def test_require_end(self):
        expr, parser = parse("1 2", self.reporter, require_end=True)
        self.assertIsNone(expr)
        self.assertEqual(parser.errors[0].message, "Expect end of expression.")
        self.assertEqual(parser.errors[0].token.lexeme, "2")

    def test_keyword_is_not_an_expression(self):
        expr, parser = parse("var", self.reporter)
        self.assertIsNone(expr)
        self.assertEqual(parser.errors[0].message, "Expect expression.")

    def test_error_line_numbers(self):
        parse("1 +\n\n)", self.reporter)
        self.assertEqual(self.reporter.reports[0].line, 3)

    def test_parse_string_raises_first_error(self):
        with self.assertRaises(ParseError) as ctx:
            parse_string("== 1")
        self.assertEqual(ctx.exception.message, "Missing left-hand operand.")
        self.assertEqual(str(ctx.exception), "[line 1] Error at '==': Missing left-hand operand.")


if __name__ == "__main__":
    unittest.main(verbosity=2)
